"""
In-memory voucher repository.
"""
from dataclasses import replace
from typing import Any, Dict, Optional

from vouchers.config.logging_config import get_logger
from vouchers.data.base_repository import VoucherRepository
from vouchers.data.models import Number, Voucher

logger = get_logger(__name__)


class InMemoryVoucherRepository(VoucherRepository):
    """In-memory voucher store.

    Vouchers live in a dict keyed by id; ids are sequential integers
    starting at 1. Used for testing and development.
    """

    def __init__(self, connection_config: Dict[str, Any] = None):
        """Initialize the repository with an empty store.

        Args:
            connection_config: Not used for in-memory repository
        """
        super().__init__(connection_config)
        self._store: Dict[int, Voucher] = {}
        self._next_id = 1

    async def connect(self) -> bool:
        """Mark the in-memory store as connected.

        Returns:
            bool: Always returns True
        """
        self._is_connected = True
        logger.debug("Connected to in-memory voucher repository")
        return True

    async def disconnect(self) -> None:
        """Mark the in-memory store as disconnected."""
        self._is_connected = False
        logger.debug("Disconnected from in-memory voucher repository")

    async def get_voucher_by_code(self, code: str) -> Optional[Voucher]:
        """Find a voucher by code.

        Args:
            code: Voucher code

        Returns:
            Optional[Voucher]: Copy of the stored voucher, None if not found
        """
        self._check_connection()
        for voucher in self._store.values():
            if voucher.code == code:
                return replace(voucher)
        return None

    async def create_voucher(self, code: str, discount: Number) -> None:
        """Store a new, unused voucher under the next id.

        Args:
            code: Voucher code
            discount: Discount percentage
        """
        self._check_connection()
        voucher = Voucher(id=self._next_id, code=code, discount=discount, used=False)
        self._store[voucher.id] = voucher
        self._next_id += 1

    async def use_voucher(self, id: int) -> None:
        """Mark a voucher as used.

        Args:
            id: Voucher identifier
        """
        self._check_connection()

        voucher = self._store.get(id)
        if voucher is None:
            logger.warning(f"Voucher with ID {id} not found")
            return

        voucher.used = True
