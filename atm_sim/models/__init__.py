"""Domain models for the ATM simulation."""

from atm_sim.models.base import Event

__all__ = ["Event"]
