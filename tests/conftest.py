# tests/conftest.py
import pytest
import pytest_asyncio

from vouchers.data.memory_repository import InMemoryVoucherRepository
from vouchers.services.voucher_service import VoucherService


class RecordingVoucherRepository(InMemoryVoucherRepository):
    """In-memory store that records every call made to it"""

    def __init__(self):
        super().__init__()
        self.calls = []

    @property
    def writes(self):
        return [call for call in self.calls if call[0] in ("create_voucher", "use_voucher")]

    async def get_voucher_by_code(self, code):
        self.calls.append(("get_voucher_by_code", code))
        return await super().get_voucher_by_code(code)

    async def create_voucher(self, code, discount):
        self.calls.append(("create_voucher", code, discount))
        await super().create_voucher(code, discount)

    async def use_voucher(self, id):
        self.calls.append(("use_voucher", id))
        await super().use_voucher(id)


@pytest_asyncio.fixture
async def repository():
    """Create a connected recording repository"""
    repo = RecordingVoucherRepository()
    await repo.connect()
    yield repo
    await repo.disconnect()


@pytest.fixture
def service(repository):
    """Create a VoucherService on top of the recording repository"""
    return VoucherService(repository)


@pytest_asyncio.fixture
async def stored_voucher(repository):
    """Seed the store with voucher test1 (10% discount), then forget the seeding calls"""
    await repository.create_voucher("test1", 10)
    voucher = await repository.get_voucher_by_code("test1")
    repository.calls.clear()
    return voucher
