"""Types for token actions."""

from dataclasses import dataclass
from typing import Any

from .constants import MAX_FEE_PERCENT, U64_MAX
from .errors import ActionError, ActionErrorCode


def is_whole(value: Any) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ActionPolicy:
    """A named fee rule.

    Attributes:
        name: Unique action name (e.g. "boost", "tip").
        price: Fixed transfer amount in atomic units.
        fee_percent: Whole percent of the amount kept as fee (0-100).
        is_variable: Caller supplies the amount at dispatch time.
        is_platform_action: Payments go to the platform collector.
    """

    name: str
    price: int
    fee_percent: int
    is_variable: bool = False
    is_platform_action: bool = False

    def validate(self) -> None:
        if not is_whole(self.fee_percent) or not 0 <= self.fee_percent <= MAX_FEE_PERCENT:
            raise ActionError(ActionErrorCode.INVALID_FEE_PERCENT, f"got {self.fee_percent!r}")
        if not isinstance(self.name, str) or not self.name:
            raise ActionError(ActionErrorCode.INVALID_ACTION, "name cannot be empty")
        if not is_whole(self.price) or not 0 <= self.price <= U64_MAX:
            raise ActionError(ActionErrorCode.INCORRECT_AMOUNT, f"price {self.price!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "price": self.price,
            "feePercent": self.fee_percent,
            "isVariable": self.is_variable,
            "isPlatformAction": self.is_platform_action,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ActionPolicy":
        return cls(
            name=data["name"],
            price=int(data.get("price", 0)),
            fee_percent=int(data["feePercent"]),
            is_variable=bool(data.get("isVariable", False)),
            is_platform_action=bool(data.get("isPlatformAction", False)),
        )


@dataclass(frozen=True)
class FeeSplit:
    """Net and fee portions of a transfer amount."""

    net: int
    fee: int

    @property
    def total(self) -> int:
        return self.net + self.fee


@dataclass(frozen=True)
class TransferRecord:
    """Record emitted after a successful dispatch.

    Attributes:
        action: Action name that was dispatched.
        amount: Gross amount charged to the payer.
        fee_percent: Fee percentage applied.
        source: Payer token account.
        destination: Account that received the net amount.
        net_amount: Amount sent to the destination.
        fee_amount: Amount sent to the fee collector.
    """

    action: str
    amount: int
    fee_percent: int
    source: str
    destination: str
    net_amount: int = 0
    fee_amount: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action,
            "amount": str(self.amount),
            "feePercent": self.fee_percent,
            "from": self.source,
            "to": self.destination,
            "netAmount": str(self.net_amount),
            "feeAmount": str(self.fee_amount),
        }
