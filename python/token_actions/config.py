"""Environment-driven settings.

Values are read from ``TOKEN_ACTIONS_*`` environment variables, optionally
loaded from a ``.env`` file.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_PROGRAM_ID

ENV_PREFIX = "TOKEN_ACTIONS_"


def _env(name: str, default: str = "") -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


@dataclass
class TokenActionsSettings:
    """Deployment settings for a token actions registry.

    Attributes:
        network: Cluster name or CAIP-2 identifier.
        rpc_url: Custom RPC endpoint; the network default is used when empty.
        program_id: Program that owns the registry.
        token_mint: Asset accepted by the registry.
        fee_wallet: Fee collector identity.
        platform_wallet: Platform collector identity.
        authority: Registry authority identity.
        authority_private_key: Base58 keypair used to sign transfers.
        log_level: Logging level name.
    """

    network: str = "devnet"
    rpc_url: str = ""
    program_id: str = DEFAULT_PROGRAM_ID
    token_mint: str = ""
    fee_wallet: str = ""
    platform_wallet: str = ""
    authority: str = ""
    authority_private_key: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "TokenActionsSettings":
        """Build settings from the environment.

        Variables already set in the process win over the ``.env`` file.
        """
        load_dotenv(dotenv_path)
        return cls(
            network=_env("NETWORK", "devnet"),
            rpc_url=_env("RPC_URL"),
            program_id=_env("PROGRAM_ID", DEFAULT_PROGRAM_ID),
            token_mint=_env("TOKEN_MINT"),
            fee_wallet=_env("FEE_WALLET"),
            platform_wallet=_env("PLATFORM_WALLET"),
            authority=_env("AUTHORITY"),
            authority_private_key=_env("AUTHORITY_PRIVATE_KEY"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
        )

    def resolve_rpc_url(self) -> str:
        """Return the configured RPC URL or the network default."""
        if self.rpc_url:
            return self.rpc_url

        from .svm.utils import get_network_config

        return get_network_config(self.network)["rpc_url"]

    def missing(self) -> list[str]:
        """Names of required settings that are empty."""
        required = {
            "TOKEN_MINT": self.token_mint,
            "FEE_WALLET": self.fee_wallet,
            "PLATFORM_WALLET": self.platform_wallet,
            "AUTHORITY": self.authority,
        }
        return [f"{ENV_PREFIX}{name}" for name, value in required.items() if not value]
