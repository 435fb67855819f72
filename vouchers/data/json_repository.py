"""
JSON file voucher repository.

Keeps the whole store in one JSON document so vouchers survive between CLI
invocations:

    {"next_id": 3, "vouchers": [{"id": 1, "code": "...", "discount": 10, "used": false}, ...]}
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from vouchers.config.logging_config import get_logger
from vouchers.data.base_repository import VoucherRepository
from vouchers.data.models import Number, Voucher
from vouchers.utils.error_handling import RepositoryError

logger = get_logger(__name__)


class JsonFileVoucherRepository(VoucherRepository):
    """Voucher store backed by a JSON file.

    The file is read once on connect() and rewritten after every mutation.
    A missing file is an empty store; its parent directory is created.
    """

    def __init__(self, path: Union[str, Path], connection_config: Dict[str, Any] = None):
        """Initialize the repository.

        Args:
            path: Location of the JSON document
            connection_config: Extra connection parameters (``indent`` for the dump)
        """
        super().__init__(connection_config)
        self.path = Path(path)
        self._vouchers: List[Voucher] = []
        self._next_id = 1

    async def connect(self) -> bool:
        """Load the store from disk.

        Returns:
            bool: True once the file has been read

        Raises:
            RepositoryError: If the file cannot be read or parsed
        """
        self._load()
        self._is_connected = True
        logger.debug(f"Connected to voucher store at {self.path}")
        return True

    async def disconnect(self) -> None:
        """Stop accepting operations. The file is already up to date."""
        self._is_connected = False
        logger.debug(f"Disconnected from voucher store at {self.path}")

    async def get_voucher_by_code(self, code: str) -> Optional[Voucher]:
        """Find a voucher by code.

        Args:
            code: Voucher code

        Returns:
            Optional[Voucher]: Copy of the stored voucher, None if not found
        """
        self._check_connection()
        for voucher in self._vouchers:
            if voucher.code == code:
                return Voucher.from_dict(voucher.to_dict())
        return None

    async def create_voucher(self, code: str, discount: Number) -> None:
        """Store a new, unused voucher and write the file.

        Args:
            code: Voucher code
            discount: Discount percentage

        Raises:
            RepositoryError: If the file cannot be written
        """
        self._check_connection()
        self._vouchers.append(Voucher(id=self._next_id, code=code, discount=discount, used=False))
        self._next_id += 1
        try:
            self._save("create_voucher")
        except RepositoryError:
            self._vouchers.pop()
            self._next_id -= 1
            raise

    async def use_voucher(self, id: int) -> None:
        """Mark a voucher as used and write the file.

        Args:
            id: Voucher identifier

        Raises:
            RepositoryError: If the file cannot be written
        """
        self._check_connection()

        for voucher in self._vouchers:
            if voucher.id == id:
                voucher.used = True
                try:
                    self._save("use_voucher")
                except RepositoryError:
                    voucher.used = False
                    raise
                return

        logger.warning(f"Voucher with ID {id} not found")

    def _load(self) -> None:
        """Read the store from disk, starting empty when the file does not exist."""
        if not self.path.exists():
            self._vouchers = []
            self._next_id = 1
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
            vouchers = [Voucher.from_dict(item) for item in document.get("vouchers", [])]
            next_id = document.get("next_id", max((v.id for v in vouchers), default=0) + 1)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            self.handle_db_error(e, "connect")
            raise RepositoryError(f"Could not read voucher store {self.path}", cause=e) from e

        self._vouchers = vouchers
        self._next_id = next_id

    def _save(self, operation: str) -> None:
        """Write the whole store back to disk."""
        document = {
            "next_id": self._next_id,
            "vouchers": [voucher.to_dict() for voucher in self._vouchers]
        }

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_name(self.path.name + ".tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=self.connection_config.get("indent", 2))
            tmp_path.replace(self.path)
        except OSError as e:
            self.handle_db_error(e, operation)
            raise RepositoryError(f"Could not write voucher store {self.path}", cause=e) from e
