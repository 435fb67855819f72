"""
Base repository interface for voucher storage.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from vouchers.config.logging_config import get_logger
from vouchers.data.models import Number, Voucher

logger = get_logger(__name__)


class VoucherRepository(ABC):
    """Base class for all voucher store implementations.

    This abstract class defines the interface the voucher service consumes.
    Uniqueness of codes and the discount range are business rules enforced
    by the service; implementations only store what they are given.
    """

    def __init__(self, connection_config: Optional[Dict[str, Any]] = None):
        """Initialize the repository with connection configuration.

        Args:
            connection_config: Storage connection parameters
        """
        self.connection_config = connection_config or {}
        self._is_connected = False

    @abstractmethod
    async def connect(self) -> bool:
        """Open the underlying storage.

        Returns:
            bool: True if connection successful
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Release the underlying storage."""
        pass

    @abstractmethod
    async def get_voucher_by_code(self, code: str) -> Optional[Voucher]:
        """Retrieve a voucher by its code.

        Args:
            code: Voucher code

        Returns:
            Optional[Voucher]: Voucher if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_voucher(self, code: str, discount: Number) -> None:
        """Store a new, unused voucher.

        Args:
            code: Voucher code, assumed not to exist yet
            discount: Discount percentage
        """
        pass

    @abstractmethod
    async def use_voucher(self, id: int) -> None:
        """Mark a voucher as used.

        Args:
            id: Voucher identifier
        """
        pass

    @property
    def is_connected(self) -> bool:
        return self._is_connected

    def _check_connection(self) -> None:
        """Check if the repository is connected.

        Raises:
            RuntimeError: If not connected
        """
        if not self._is_connected:
            raise RuntimeError("Repository is not connected")

    def handle_db_error(self, error: Exception, operation: str) -> Dict[str, Any]:
        """Handle storage errors in a consistent way.

        Args:
            error: The exception that occurred
            operation: Name of the storage operation that failed

        Returns:
            Dict[str, Any]: Error information
        """
        error_info = {
            "repository": self.__class__.__name__,
            "operation": operation,
            "error_type": type(error).__name__,
            "error_message": str(error)
        }

        logger.error(f"Database error: {error_info}")
        return error_info
