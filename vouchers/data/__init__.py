"""
Voucher persistence: models and repository implementations.
"""

from vouchers.data.base_repository import VoucherRepository
from vouchers.data.json_repository import JsonFileVoucherRepository
from vouchers.data.memory_repository import InMemoryVoucherRepository
from vouchers.data.models import OrderDiscount, Voucher

__all__ = [
    "VoucherRepository",
    "InMemoryVoucherRepository",
    "JsonFileVoucherRepository",
    "Voucher",
    "OrderDiscount",
]
