"""
Voucher service.

This module holds the voucher business rules: which vouchers may be created
and how a voucher changes the amount of an order.
"""

from vouchers.config.logging_config import get_logger
from vouchers.data.base_repository import VoucherRepository
from vouchers.data.models import Number, OrderDiscount
from vouchers.utils.error_handling import BadRequestError, ConflictError

logger = get_logger(__name__)

# Discount percentages must lie strictly between these bounds
MIN_DISCOUNT = 1
MAX_DISCOUNT = 100

# Discounts only apply to orders of at least this amount
MIN_ORDER_AMOUNT = 100

VOUCHER_ALREADY_EXISTS = "Voucher already exist."
INVALID_DISCOUNT = "Invalid discount value."
VOUCHER_NOT_FOUND = "Voucher does not exist."


class VoucherService:
    """
    Creates vouchers and applies them to orders.

    Each call issues at most one store read followed by at most one store
    write. Rejections are raised as ConflictError or BadRequestError and
    leave the store untouched.
    """

    def __init__(self, repository: VoucherRepository):
        """
        Initialize the voucher service.

        Args:
            repository: Voucher store the service reads and writes
        """
        self.repository = repository

    async def create_voucher(self, code: str, discount: Number) -> None:
        """
        Create a new voucher.

        The duplicate check runs before the range check, so an existing code
        is reported as a conflict whatever the discount.

        Args:
            code: Unique voucher code
            discount: Discount percentage, strictly between 1 and 100

        Raises:
            ConflictError: If a voucher with this code already exists
            BadRequestError: If the discount is out of range
        """
        existing = await self.repository.get_voucher_by_code(code)
        if existing is not None:
            logger.warning(f"Rejected voucher {code!r}: code already exists")
            raise ConflictError(VOUCHER_ALREADY_EXISTS)

        if not (MIN_DISCOUNT < discount < MAX_DISCOUNT):
            logger.warning(f"Rejected voucher {code!r}: invalid discount {discount}")
            raise BadRequestError(INVALID_DISCOUNT)

        await self.repository.create_voucher(code, discount)
        logger.info(f"Created voucher {code!r} with {discount}% discount")

    async def apply_voucher(self, code: str, amount: Number) -> OrderDiscount:
        """
        Apply a voucher to an order amount.

        A used voucher, or an order below MIN_ORDER_AMOUNT, leaves the amount
        unchanged and the voucher untouched. The result still reports the
        voucher's discount in both cases.

        Args:
            code: Voucher code
            amount: Order amount

        Returns:
            OrderDiscount: Original amount, voucher discount, final amount and
            whether the discount was applied

        Raises:
            ConflictError: If no voucher has this code
        """
        voucher = await self.repository.get_voucher_by_code(code)
        if voucher is None:
            logger.warning(f"Cannot apply voucher {code!r}: not found")
            raise ConflictError(VOUCHER_NOT_FOUND)

        if voucher.used:
            logger.info(f"Voucher {code!r} already used, order amount unchanged")
            return OrderDiscount(
                amount=amount,
                discount=voucher.discount,
                final_amount=amount,
                applied=False
            )

        if amount < MIN_ORDER_AMOUNT:
            logger.info(
                f"Order amount {amount} below {MIN_ORDER_AMOUNT}, "
                f"voucher {code!r} not applied"
            )
            return OrderDiscount(
                amount=amount,
                discount=voucher.discount,
                final_amount=amount,
                applied=False
            )

        await self.repository.use_voucher(voucher.id)
        final_amount = amount - amount * (voucher.discount / 100)
        logger.info(f"Applied voucher {code!r}: {amount} -> {final_amount}")

        return OrderDiscount(
            amount=amount,
            discount=voucher.discount,
            final_amount=final_amount,
            applied=True
        )
