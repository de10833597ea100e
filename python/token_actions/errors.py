"""Error types for registry and dispatch operations."""

from enum import Enum


class ActionErrorCode(str, Enum):
    """Stable error kinds reported by registry and dispatch operations."""

    UNAUTHORIZED = "unauthorized"
    INCORRECT_AMOUNT = "incorrect_amount"
    WRONG_ASSET_TYPE = "wrong_asset_type"
    INVALID_FEE_PERCENT = "invalid_fee_percent"
    INVALID_PLATFORM_ACTION = "invalid_platform_action"
    INVALID_USER_ACTION = "invalid_user_action"
    INVALID_ACTION = "invalid_action"
    ALREADY_INITIALIZED = "already_initialized"
    REGISTRY_NOT_FOUND = "registry_not_found"


_MESSAGES = {
    ActionErrorCode.UNAUTHORIZED: "Unauthorized.",
    ActionErrorCode.INCORRECT_AMOUNT: "Amount must be greater than 0.",
    ActionErrorCode.WRONG_ASSET_TYPE: (
        "Wrong token mint. This registry only accepts the configured token."
    ),
    ActionErrorCode.INVALID_FEE_PERCENT: "Invalid fee percent. Must be between 0 and 100.",
    ActionErrorCode.INVALID_PLATFORM_ACTION: "Invalid platform action. Action not supported.",
    ActionErrorCode.INVALID_USER_ACTION: "Invalid user action. Action not supported.",
    ActionErrorCode.INVALID_ACTION: "Invalid action. Action not found or invalid.",
    ActionErrorCode.ALREADY_INITIALIZED: "Registry already initialized.",
    ActionErrorCode.REGISTRY_NOT_FOUND: "Registry not found.",
}


class ActionError(Exception):
    """A registry or dispatch operation was rejected.

    Attributes:
        code: The error kind.
        detail: Optional extra context (action name, offending value).
    """

    def __init__(self, code: ActionErrorCode, detail: str | None = None):
        self.code = code
        self.detail = detail
        message = _MESSAGES[code]
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class TransferError(Exception):
    """The ledger refused or failed a transfer.

    Attributes:
        reason: Machine-readable failure reason (see ``constants.ERR_*``).
    """

    def __init__(self, reason: str, message: str | None = None):
        self.reason = reason
        super().__init__(message or reason)
