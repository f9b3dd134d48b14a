"""Bank service capability and its in-memory directory implementation."""

from atm_sim.bank.base import BankService
from atm_sim.bank.in_memory import InMemoryBankService

__all__ = ["BankService", "InMemoryBankService"]
