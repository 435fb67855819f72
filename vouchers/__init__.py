"""
Voucher discount service.

Create discount vouchers and apply them to order amounts.
"""

__version__ = "0.1.0"
