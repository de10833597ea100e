"""Utility functions for the Solana (SVM) binding."""

import re

from solders.pubkey import Pubkey  # type: ignore
from spl.token.constants import TOKEN_2022_PROGRAM_ID  # type: ignore
from spl.token.instructions import get_associated_token_address  # type: ignore

from ..constants import CONFIG_SEED, DEFAULT_PROGRAM_ID
from .constants import NETWORK_ALIASES, NETWORK_CONFIGS, SVM_ADDRESS_REGEX


def validate_svm_address(address: str) -> bool:
    """Check that a string is a base58 Solana public key."""
    if not address or not re.match(SVM_ADDRESS_REGEX, address):
        return False
    try:
        Pubkey.from_string(address)
    except Exception:
        return False
    return True


def normalize_network(network: str) -> str:
    """Normalize a cluster name or CAIP-2 identifier to CAIP-2."""
    if network in NETWORK_CONFIGS:
        return network
    caip2 = NETWORK_ALIASES.get(network.lower())
    if caip2 is None:
        raise ValueError(f"Not a Solana network: {network}")
    return caip2


def get_network_config(network: str) -> dict[str, str]:
    """Get the RPC configuration for a Solana network."""
    return NETWORK_CONFIGS[normalize_network(network)]


def derive_ata(owner: str, mint: str, token_program: str | None = None) -> str:
    """Derive the associated token account for an owner and mint.

    Defaults to the Token-2022 program.
    """
    program_id = Pubkey.from_string(token_program) if token_program else TOKEN_2022_PROGRAM_ID
    ata = get_associated_token_address(
        Pubkey.from_string(owner),
        Pubkey.from_string(mint),
        token_program_id=program_id,
    )
    return str(ata)


def derive_registry_address(program_id: str = DEFAULT_PROGRAM_ID) -> tuple[str, int]:
    """Derive the registry PDA and bump for a program.

    Returns:
        (address, bump) tuple.
    """
    address, bump = Pubkey.find_program_address([CONFIG_SEED], Pubkey.from_string(program_id))
    return str(address), bump
