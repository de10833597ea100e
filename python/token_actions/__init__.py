"""Token actions: named fee policies and fee-split transfer dispatch.

A ``Registry`` holds the named ``ActionPolicy`` entries of a deployment and
is edited only by its authority. An ``ActionDispatcher`` resolves an action,
splits the amount into net and fee portions and issues the transfers to a
``TransferLedger``.

Usage:
    from token_actions import ActionDispatcher, ActionPolicy, InMemoryLedger, Registry

    registry = Registry.create(authority, fee_wallet, platform_wallet, mint, [
        ActionPolicy("boost", price=1000, fee_percent=10, is_platform_action=True),
    ])
    dispatcher = ActionDispatcher(ledger)
    record = dispatcher.platform_dispatch(registry, "boost", mint, payer_ata,
                                          platform_ata, fee_ata, authority)
"""

from .config import TokenActionsSettings
from .dispatcher import ActionDispatcher, DispatcherConfig
from .errors import ActionError, ActionErrorCode, TransferError
from .ledger import InMemoryLedger, TokenAccount, TransferLedger
from .registry import Registry, RegistryStore
from .split import calculate_fee_split
from .types import ActionPolicy, FeeSplit, TransferRecord

__version__ = "0.1.0"

__all__ = [
    # Types
    "ActionPolicy",
    "FeeSplit",
    "TransferRecord",
    # Errors
    "ActionError",
    "ActionErrorCode",
    "TransferError",
    # Registry
    "Registry",
    "RegistryStore",
    # Dispatch
    "ActionDispatcher",
    "DispatcherConfig",
    "calculate_fee_split",
    # Ledgers
    "InMemoryLedger",
    "TokenAccount",
    "TransferLedger",
    # Config
    "TokenActionsSettings",
]
