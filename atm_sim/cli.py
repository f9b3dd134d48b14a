"""Command-line entry point for the ATM simulation.

Usage:
    atm-sim
    atm-sim --demo-customers 5 --seed 42
    atm-sim --log-level DEBUG --log-format json
"""

import argparse
import sys
from decimal import Decimal

from atm_sim.atm import Atm
from atm_sim.bank import InMemoryBankService
from atm_sim.config import AtmSimConfig, SeedConfig
from atm_sim.exceptions import ConfigurationError
from atm_sim.generators import CustomerGenerator
from atm_sim.logging import get_logger, setup_logging
from atm_sim.models.banking import Account, User
from atm_sim.sinks import ConsoleSink

logger = get_logger(__name__)

# (name, pin, account_id, opening balance)
BUILTIN_CUSTOMERS: list[tuple[str, str, str, Decimal]] = [
    ("Alice", "1234", "ACC1001", Decimal("1000")),
    ("Bob", "4321", "ACC2001", Decimal("500")),
]


def build_bank(seed_config: SeedConfig | None = None) -> InMemoryBankService:
    """Create a bank with the built-in customers plus optional demo ones."""
    seed_config = seed_config or SeedConfig()
    bank = InMemoryBankService()

    for name, pin, account_id, balance in BUILTIN_CUSTOMERS:
        bank.register(User(name=name, pin=pin), [Account(account_id, balance)])

    if seed_config.demo_customers:
        generator = CustomerGenerator(seed=seed_config.seed, locale=seed_config.locale)
        for customer in generator.generate_batch(seed_config.demo_customers):
            bank.register(customer.user, customer.accounts)
            logger.debug(
                "Demo customer %s: accounts=%s pin=%s",
                customer.user.name,
                ",".join(customer.user.account_ids),
                customer.user.pin,
            )

    logger.info("Bank ready: %s", bank.summary())
    return bank


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive ATM simulation")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: ATM_SIM_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: ATM_SIM_LOG_FORMAT or standard)",
    )
    parser.add_argument(
        "--demo-customers",
        type=int,
        default=None,
        help="Number of extra generated customers (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for generated customers",
    )
    parser.add_argument(
        "--currency",
        type=str,
        default=None,
        help="Currency symbol used when printing amounts (default: $)",
    )
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> AtmSimConfig:
    """Read the environment, then apply command-line overrides."""
    config = AtmSimConfig.from_env()
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.demo_customers is not None:
        if args.demo_customers < 0:
            raise ConfigurationError("--demo-customers must not be negative")
        config.seed.demo_customers = args.demo_customers
    if args.seed is not None:
        config.seed.seed = args.seed
    if args.currency is not None:
        config.display.currency_symbol = args.currency
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    try:
        config = load_config(args)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_format)

    bank = build_bank(config.seed)
    sink = ConsoleSink(currency_symbol=config.display.currency_symbol)
    atm = Atm(bank, sink)

    try:
        atm.run_session(input)
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted")
    finally:
        sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
