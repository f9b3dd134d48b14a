"""Synthetic customer generators for seeding the bank directory."""

from atm_sim.generators.base import BaseGenerator
from atm_sim.generators.customer import CustomerGenerator, DemoCustomer

__all__ = ["BaseGenerator", "CustomerGenerator", "DemoCustomer"]
