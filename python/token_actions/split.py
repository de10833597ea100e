"""Fee split calculation.

The fee is a whole-percent share of the amount, truncated toward zero. The
remainder (including any dust) goes to the net recipient.
"""

from .constants import MAX_FEE_PERCENT, U64_MAX
from .errors import ActionError, ActionErrorCode
from .types import FeeSplit, is_whole


def calculate_fee_split(amount: int, fee_percent: int) -> FeeSplit:
    """Split an amount into net and fee portions.

    Uses a single floor division: ``fee = amount * fee_percent // 100``.

    Args:
        amount: Gross amount in atomic units, an int from 1 to 2**64 - 1.
        fee_percent: Whole percent kept as fee (0-100).

    Returns:
        FeeSplit with ``net + fee == amount``.

    Raises:
        ActionError: INCORRECT_AMOUNT for a zero, non-integer or out-of-range amount,
            INVALID_FEE_PERCENT for a percentage outside 0-100.
    """
    if not is_whole(amount) or not 0 < amount <= U64_MAX:
        raise ActionError(ActionErrorCode.INCORRECT_AMOUNT, f"got {amount!r}")
    if not is_whole(fee_percent) or not 0 <= fee_percent <= MAX_FEE_PERCENT:
        raise ActionError(ActionErrorCode.INVALID_FEE_PERCENT, f"got {fee_percent!r}")

    # Python integers do not wrap, so the product is exact before dividing
    fee = (amount * fee_percent) // 100
    return FeeSplit(net=amount - fee, fee=fee)
