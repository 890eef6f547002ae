"""Invoice totals with a percentage discount, and the mini ERP report."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

BANNER = "=" * 24 + "\nCROSSBOW TECH - MINI ERP\n" + "=" * 24 + "\n"

DEFAULT_PRICE = 5000
DEFAULT_QTY = 3
DEFAULT_DISCOUNT = 0.15


def calculate_total(price: int, qty: int) -> int:
    """Return the total amount for ``qty`` units at ``price`` each."""
    return price * qty


def total_discount(total_amount: int, discount: float) -> int:
    """Return ``total_amount`` reduced by the fraction ``discount``, truncated."""
    return int(total_amount - total_amount * discount)


def calculate_discount(total_amount: int, discount_price: float) -> int:
    """Return how much was taken off ``total_amount`` to reach ``discount_price``."""
    return int(total_amount - discount_price)


def invoice_report(
    price: int = DEFAULT_PRICE,
    qty: int = DEFAULT_QTY,
    discount: float = DEFAULT_DISCOUNT,
) -> str:
    """Return the banner and the totals for one invoice line."""
    total_amount = calculate_total(price, qty)
    discount_price = total_discount(total_amount, discount)
    discount_total = calculate_discount(total_amount, discount_price)
    return (
        BANNER
        + f"Total Amount: ${total_amount}\n"
        + f"Discount ({discount * 100:.0f}%): ${discount_total:.0f}\n"
        + f"Total Amount After Discount: ${discount_price:.0f}\n"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the invoice report."""
    parser = argparse.ArgumentParser(
        prog="mini-erp", description="Print an invoice total with a discount."
    )
    parser.add_argument("--price", type=int, default=DEFAULT_PRICE)
    parser.add_argument("--qty", type=int, default=DEFAULT_QTY)
    parser.add_argument("--discount", type=float, default=DEFAULT_DISCOUNT)
    args = parser.parse_args(argv)
    sys.stdout.write(invoice_report(args.price, args.qty, args.discount))
    return 0


if __name__ == "__main__":
    sys.exit(main())