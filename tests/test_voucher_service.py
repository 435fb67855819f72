# tests/test_voucher_service.py
import pytest

from vouchers.data.models import OrderDiscount
from vouchers.services.voucher_service import VoucherService
from vouchers.utils.error_handling import BadRequestError, ConflictError


# create_voucher

@pytest.mark.asyncio
@pytest.mark.parametrize("discount", [10, 1, 100, 0, 150])
async def test_create_rejects_existing_code(service, repository, stored_voucher, discount):
    """Test that an existing code is a conflict whatever the discount"""
    with pytest.raises(ConflictError) as exc_info:
        await service.create_voucher("test1", discount)

    assert exc_info.value == {"type": "conflict", "message": "Voucher already exist."}
    assert repository.writes == []


@pytest.mark.asyncio
@pytest.mark.parametrize("discount", [1, 0.5, 0, -10, 100, 100.5, 1000])
async def test_create_rejects_out_of_range_discount(service, repository, discount):
    """Test that discounts outside (1, 100) are bad requests"""
    with pytest.raises(BadRequestError) as exc_info:
        await service.create_voucher("test1", discount)

    assert exc_info.value == {"type": "bad_request", "message": "Invalid discount value."}
    assert repository.writes == []
    assert await repository.get_voucher_by_code("test1") is None


@pytest.mark.asyncio
async def test_create_rejects_nan_discount(service, repository):
    """Test that a NaN discount is not treated as in range"""
    with pytest.raises(BadRequestError):
        await service.create_voucher("test1", float("nan"))

    assert repository.writes == []


@pytest.mark.asyncio
@pytest.mark.parametrize("discount", [1.01, 2, 10, 50, 99, 99.99])
async def test_create_voucher(service, repository, discount):
    """Test creating a voucher with a valid discount"""
    result = await service.create_voucher("test1", discount)

    assert result is None
    assert repository.writes == [("create_voucher", "test1", discount)]

    voucher = await repository.get_voucher_by_code("test1")
    assert voucher.code == "test1"
    assert voucher.discount == discount
    assert voucher.used is False


@pytest.mark.asyncio
async def test_create_looks_up_before_writing(service, repository):
    """Test that the lookup is issued before the write"""
    await service.create_voucher("test1", 10)

    assert repository.calls == [
        ("get_voucher_by_code", "test1"),
        ("create_voucher", "test1", 10),
    ]


# apply_voucher

@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [0, 50, 100, 1000])
async def test_apply_unknown_voucher(service, repository, amount):
    """Test that applying an unknown code is a conflict"""
    with pytest.raises(ConflictError) as exc_info:
        await service.apply_voucher("test1", amount)

    assert exc_info.value == {"type": "conflict", "message": "Voucher does not exist."}
    assert repository.writes == []


@pytest.mark.asyncio
async def test_apply_below_minimum_amount(service, repository, stored_voucher):
    """Test that orders below 100 are not discounted"""
    order = await service.apply_voucher("test1", 50)

    assert order == OrderDiscount(amount=50, discount=10, final_amount=50, applied=False)
    assert repository.writes == []

    voucher = await repository.get_voucher_by_code("test1")
    assert voucher.used is False


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [50, 100, 500])
async def test_apply_used_voucher(service, repository, stored_voucher, amount):
    """Test that a used voucher leaves the amount unchanged"""
    await repository.use_voucher(stored_voucher.id)
    repository.calls.clear()

    order = await service.apply_voucher("test1", amount)

    assert order.amount == amount
    assert order.discount == 10
    assert order.final_amount == amount
    assert order.applied is False
    assert repository.writes == []


@pytest.mark.asyncio
async def test_apply_discount_and_mark_used(service, repository, stored_voucher):
    """Test applying a discount to an order of 100"""
    order = await service.apply_voucher("test1", 100)

    assert order.to_dict() == {"amount": 100, "discount": 10, "finalAmount": 90, "applied": True}
    assert repository.writes == [("use_voucher", stored_voucher.id)]

    voucher = await repository.get_voucher_by_code("test1")
    assert voucher.used is True


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [100, 150, 250.5, 10000])
async def test_apply_discount_amounts(service, stored_voucher, amount):
    """Test the final amount arithmetic"""
    order = await service.apply_voucher("test1", amount)

    assert order.applied is True
    assert order.final_amount == amount - amount * (10 / 100)


@pytest.mark.asyncio
async def test_apply_twice_only_discounts_once(service, repository, stored_voucher):
    """Test that the second application sees the voucher as used"""
    first = await service.apply_voucher("test1", 200)
    second = await service.apply_voucher("test1", 200)

    assert first == OrderDiscount(amount=200, discount=10, final_amount=180, applied=True)
    assert second == OrderDiscount(amount=200, discount=10, final_amount=200, applied=False)
    assert repository.writes == [("use_voucher", stored_voucher.id)]


@pytest.mark.asyncio
async def test_apply_trusts_stored_discount(repository):
    """Test that the stored discount is used as-is at apply time"""
    await repository.create_voucher("legacy", 100)
    service = VoucherService(repository)

    order = await service.apply_voucher("legacy", 100)

    assert order.applied is True
    assert order.final_amount == 0



@pytest.mark.asyncio
@pytest.mark.parametrize("amount,applied,final_amount", [
    (99.99, False, 99.99),
    (100, True, 90),
])
async def test_apply_minimum_order_boundary(service, repository, stored_voucher, amount, applied, final_amount):
    """Test that the discount starts applying at an order amount of exactly 100"""
    order = await service.apply_voucher("test1", amount)

    assert order.applied is applied
    assert order.final_amount == final_amount
    assert len(repository.writes) == (1 if applied else 0)
