"""
Command-line interface for the voucher service.

Usage:
    vouchers create CODE DISCOUNT
    vouchers apply CODE AMOUNT

Results and failures are printed to stdout as JSON. Exit status is 0 on
success, 1 when the voucher operation is rejected, 2 on usage errors and
3 when the voucher store cannot be read or written.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from vouchers.config import settings
from vouchers.config.logging_config import get_logger, set_level
from vouchers.data.json_repository import JsonFileVoucherRepository
from vouchers.services.voucher_service import VoucherService
from vouchers.utils.error_handling import AppError, VoucherError

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 3


def parse_number(value: str) -> Union[int, float]:
    """Parse a numeric argument, keeping whole numbers as int."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if number != number or number in (float("inf"), float("-inf")):
        raise argparse.ArgumentTypeError(f"not a finite number: {value!r}")
    return int(number) if number.is_integer() else number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vouchers",
        description=f"{settings.app_name} {settings.app_version}"
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=settings.voucher.store_path,
        help="Path of the JSON voucher store (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="Create a voucher")
    create_parser.add_argument("code", help="Unique voucher code")
    create_parser.add_argument("discount", type=parse_number, help="Discount percentage")

    apply_parser = subparsers.add_parser("apply", help="Apply a voucher to an order amount")
    apply_parser.add_argument("code", help="Voucher code")
    apply_parser.add_argument("amount", type=parse_number, help="Order amount")

    return parser


async def run_command(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Run a parsed command against the JSON store.

    Returns:
        The JSON-serialisable result of the command

    Raises:
        VoucherError: If the voucher operation is rejected
    """
    repository = JsonFileVoucherRepository(args.store)
    await repository.connect()
    try:
        service = VoucherService(repository)
        if args.command == "create":
            await service.create_voucher(args.code, args.discount)
            return {"created": args.code}
        order = await service.apply_voucher(args.code, args.amount)
        return order.to_dict()
    finally:
        await repository.disconnect()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``vouchers`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        set_level(args.log_level)

    try:
        result = asyncio.run(run_command(args))
    except VoucherError as e:
        print(json.dumps(e.to_dict()))
        return EXIT_REJECTED
    except AppError as e:
        logger.error(f"Command failed: {e.to_dict()}")
        print(json.dumps({"error": e.message}), file=sys.stderr)
        return EXIT_ERROR

    print(json.dumps(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
