"""Demo customer generator."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from atm_sim.generators.base import BaseGenerator
from atm_sim.models.banking import Account, User


@dataclass
class DemoCustomer:
    """A generated user together with the accounts they own."""

    user: User
    accounts: list[Account]


class CustomerGenerator(BaseGenerator):
    """Generate synthetic ATM customers.

    Account numbers use the ``ACC`` prefix and start above the range used
    by the built-in customers. Numbers are unique per generator instance.
    """

    ACCOUNT_RANGE = (3000, 99999)
    ACCOUNTS_PER_CUSTOMER = [1, 2]
    ACCOUNTS_PER_CUSTOMER_WEIGHTS = [0.8, 0.2]
    MAX_OPENING_CENTS = 500_000

    def generate(self) -> DemoCustomer:
        """Generate a single customer.

        Returns
        -------
        DemoCustomer
            Generated user and accounts.
        """
        user = User(name=self.fake.name(), pin=self.fake.numerify("####"))
        num_accounts = self.rng.choices(
            self.ACCOUNTS_PER_CUSTOMER, weights=self.ACCOUNTS_PER_CUSTOMER_WEIGHTS, k=1
        )[0]
        accounts = [self._generate_account() for _ in range(num_accounts)]
        return DemoCustomer(user=user, accounts=accounts)

    def generate_batch(self, count: int) -> Iterator[DemoCustomer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        DemoCustomer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()

    def _generate_account(self) -> Account:
        low, high = self.ACCOUNT_RANGE
        number = self.fake.unique.random_int(min=low, max=high)
        cents = self.rng.randint(0, self.MAX_OPENING_CENTS)
        return Account(f"ACC{number}", Decimal(cents) / Decimal(100))
