"""
Business services built on top of the voucher store.
"""

from vouchers.services.voucher_service import VoucherService

__all__ = ["VoucherService"]
