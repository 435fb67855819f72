"""
Data models for persistence and business logic.
"""
from dataclasses import dataclass
from typing import Any, Dict, Union

Number = Union[int, float]


@dataclass
class Voucher:
    """Model representing a stored discount voucher."""

    id: int
    code: str
    discount: Number  # percentage, 1 < discount < 100 when created
    used: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to a dictionary."""
        return {
            "id": self.id,
            "code": self.code,
            "discount": self.discount,
            "used": self.used
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Voucher':
        """Create a model from a dictionary."""
        return cls(
            id=data["id"],
            code=data["code"],
            discount=data["discount"],
            used=data.get("used", False)
        )


@dataclass(frozen=True)
class OrderDiscount:
    """Result of applying a voucher to an order amount.

    ``discount`` always carries the voucher's nominal percentage, even when
    ``applied`` is False and ``final_amount`` equals ``amount``.
    """

    amount: Number
    discount: Number
    final_amount: Number
    applied: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to its wire representation."""
        return {
            "amount": self.amount,
            "discount": self.discount,
            "finalAmount": self.final_amount,
            "applied": self.applied
        }
