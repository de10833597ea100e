"""Solana (SVM) binding for token actions.

Derives registry and token account addresses, builds instructions for the
on-chain registry program, and provides a ledger that settles transfers
over RPC.

``RegistryProgram`` and ``SolanaLedger`` are imported lazily so that the
core registry can use the address helpers without loading them.
"""

from .constants import (
    NETWORK_CONFIGS,
    SOLANA_DEVNET_CAIP2,
    SOLANA_MAINNET_CAIP2,
    SOLANA_TESTNET_CAIP2,
)
from .signers import KeypairSigner
from .utils import (
    derive_ata,
    derive_registry_address,
    get_network_config,
    normalize_network,
    validate_svm_address,
)

__all__ = [
    # Constants
    "NETWORK_CONFIGS",
    "SOLANA_DEVNET_CAIP2",
    "SOLANA_MAINNET_CAIP2",
    "SOLANA_TESTNET_CAIP2",
    # Signers
    "KeypairSigner",
    # Utils
    "derive_ata",
    "derive_registry_address",
    "get_network_config",
    "normalize_network",
    "validate_svm_address",
    # Lazy
    "RegistryProgram",
    "SolanaLedger",
    "decode_registry_account",
]


def __getattr__(name: str):
    """Lazy import program and ledger components."""
    if name in ("RegistryProgram", "decode_registry_account"):
        from . import program as _program

        return getattr(_program, name)
    if name == "SolanaLedger":
        from .ledger import SolanaLedger

        return SolanaLedger
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
