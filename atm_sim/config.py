"""Configuration management for atm-sim."""

import os
from dataclasses import dataclass, field

from atm_sim.exceptions import ConfigurationError


@dataclass
class SeedConfig:
    """Demo customer seeding configuration."""

    demo_customers: int = 0
    seed: int | None = None
    locale: str = "en_US"


@dataclass
class DisplayConfig:
    """Console rendering configuration."""

    currency_symbol: str = "$"


@dataclass
class AtmSimConfig:
    """Main configuration for atm-sim."""

    seed: SeedConfig = field(default_factory=SeedConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AtmSimConfig":
        """Create config from environment variables."""
        seed = SeedConfig(
            demo_customers=_int_env("ATM_SIM_DEMO_CUSTOMERS", 0),
            seed=_int_env("ATM_SIM_SEED", None),
            locale=os.getenv("ATM_SIM_LOCALE", "en_US"),
        )

        display = DisplayConfig(
            currency_symbol=os.getenv("ATM_SIM_CURRENCY", "$"),
        )

        log_format = os.getenv("ATM_SIM_LOG_FORMAT", "standard").lower()
        if log_format not in ("standard", "json"):
            raise ConfigurationError(
                f"ATM_SIM_LOG_FORMAT must be 'standard' or 'json', got {log_format!r}"
            )

        return cls(
            seed=seed,
            display=display,
            log_level=os.getenv("ATM_SIM_LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value
