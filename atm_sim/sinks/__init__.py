"""Output sinks for rendering ATM results."""

from atm_sim.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
