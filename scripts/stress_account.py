#!/usr/bin/env python3
"""Hammer one account from many threads and check for lost updates.

Each worker alternates deposits and withdrawals against the same account
through the bank service. At the end the balance must equal the opening
balance plus every successful deposit minus every successful withdrawal,
and the log must hold exactly one record per successful call.

Usage:
    python scripts/stress_account.py
    python scripts/stress_account.py --workers 16 --operations 5000
"""

import argparse
import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from atm_sim.bank import InMemoryBankService
from atm_sim.exceptions import InsufficientFundsError
from atm_sim.logging import setup_logging
from atm_sim.models.banking import Account, TransactionType, User

logger = logging.getLogger(__name__)

ACCOUNT_ID = "ACC-STRESS"


def worker(
    bank: InMemoryBankService,
    operations: int,
    deposit: Decimal,
    withdraw: Decimal,
) -> tuple[Decimal, int]:
    """Run ``operations`` alternating calls; return (net change, successful calls)."""
    net = Decimal("0")
    ok = 0
    for i in range(operations):
        if i % 2 == 0:
            bank.deposit(ACCOUNT_ID, deposit)
            net += deposit
            ok += 1
        else:
            try:
                bank.withdraw(ACCOUNT_ID, withdraw)
            except InsufficientFundsError:
                continue
            net -= withdraw
            ok += 1
    return net, ok


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Concurrent account stress test")
    parser.add_argument("--workers", type=int, default=8, help="Worker threads (default: 8)")
    parser.add_argument(
        "--operations", type=int, default=2000, help="Calls per worker (default: 2000)"
    )
    parser.add_argument(
        "--opening-balance", type=str, default="0", help="Opening balance (default: 0)"
    )
    args = parser.parse_args()

    # Per-transaction INFO logs would dominate the run
    setup_logging("WARNING")

    opening = Decimal(args.opening_balance)
    bank = InMemoryBankService()
    bank.register(User(name="Stress", pin="0000"), [Account(ACCOUNT_ID, opening)])

    t0 = time.perf_counter()
    expected = opening
    expected_records = 0
    with ThreadPoolExecutor(max_workers=args.workers) as executor:
        futures = [
            executor.submit(worker, bank, args.operations, Decimal("100"), Decimal("50"))
            for _ in range(args.workers)
        ]
        for future in as_completed(futures):
            net, ok = future.result()
            expected += net
            expected_records += ok
    elapsed = time.perf_counter() - t0

    balance = bank.get_balance(ACCOUNT_ID)
    records = bank.list_transactions(ACCOUNT_ID)
    deposits = sum(1 for r in records if r.transaction_type is TransactionType.DEPOSIT)

    print(f"Workers: {args.workers}, calls/worker: {args.operations}, {elapsed:.2f}s")
    print(f"Balance: {balance} (expected {expected})")
    print(f"Records: {len(records)} (expected {expected_records}, deposits {deposits})")

    if balance != expected or len(records) != expected_records or balance < 0:
        print("FAILED: lost or duplicated update detected")
        return 1
    print("OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
