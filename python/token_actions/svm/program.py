"""Instruction builders and account decoding for the on-chain registry program.

The program keeps the registry in a PDA derived from the ``config`` seed and
exposes seven instructions: two dispatch shapes and five administrative
operations. Instruction data is an Anchor discriminator followed by the
Borsh-encoded arguments.
"""

from solders.instruction import AccountMeta, Instruction  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.system_program import ID as SYSTEM_PROGRAM_ID  # type: ignore
from spl.token.constants import TOKEN_2022_PROGRAM_ID  # type: ignore

from ..constants import DEFAULT_PROGRAM_ID
from ..registry import Registry
from ..types import ActionPolicy
from .codec import (
    BorshReader,
    discriminator,
    encode_action,
    encode_actions,
    encode_pubkey,
    encode_string,
    encode_u64,
    encode_u8,
)
from .constants import ACCOUNT_NAMESPACE, INSTRUCTION_NAMESPACE, REGISTRY_ACCOUNT_NAME
from .utils import derive_registry_address

REGISTRY_ACCOUNT_DISCRIMINATOR = discriminator(ACCOUNT_NAMESPACE, REGISTRY_ACCOUNT_NAME)


def _meta(address: str | Pubkey, is_signer: bool = False, is_writable: bool = False) -> AccountMeta:
    pubkey = address if isinstance(address, Pubkey) else Pubkey.from_string(address)
    return AccountMeta(pubkey=pubkey, is_signer=is_signer, is_writable=is_writable)


class RegistryProgram:
    """Builds instructions for the registry program.

    Attributes:
        program_id: Program address.
        registry_address: Registry PDA owned by the program.
    """

    def __init__(
        self,
        program_id: str = DEFAULT_PROGRAM_ID,
        token_program: Pubkey = TOKEN_2022_PROGRAM_ID,
    ):
        self.program_id = program_id
        self.registry_address, self.bump = derive_registry_address(program_id)
        self._token_program = token_program

    def _instruction(self, name: str, args: bytes, accounts: list[AccountMeta]) -> Instruction:
        data = discriminator(INSTRUCTION_NAMESPACE, name) + args
        return Instruction(Pubkey.from_string(self.program_id), data, accounts)

    def _dispatch_accounts(
        self, payer: str, destination: str, fee_account: str, mint: str, authority: str
    ) -> list[AccountMeta]:
        return [
            _meta(payer, is_writable=True),
            _meta(destination, is_writable=True),
            _meta(fee_account, is_writable=True),
            _meta(self.registry_address, is_writable=True),
            _meta(mint),
            _meta(authority, is_signer=True),
            _meta(self._token_program),
            _meta(SYSTEM_PROGRAM_ID),
        ]

    def _admin_accounts(self, authority: str) -> list[AccountMeta]:
        return [
            _meta(self.registry_address, is_writable=True),
            _meta(authority, is_signer=True),
        ]

    def platform_action(
        self,
        action: str,
        payer: str,
        platform_account: str,
        fee_account: str,
        mint: str,
        authority: str,
        amount: int = 0,
    ) -> Instruction:
        """Build a platform action; ``amount`` is ignored by the program."""
        return self._instruction(
            "platform_action",
            encode_string(action) + encode_u64(amount),
            self._dispatch_accounts(payer, platform_account, fee_account, mint, authority),
        )

    def user_action(
        self,
        action: str,
        amount: int,
        payer: str,
        receiver_account: str,
        fee_account: str,
        mint: str,
        authority: str,
    ) -> Instruction:
        return self._instruction(
            "user_action",
            encode_string(action) + encode_u64(amount),
            self._dispatch_accounts(payer, receiver_account, fee_account, mint, authority),
        )

    def init_config(
        self,
        authority: str,
        fee_wallet: str,
        platform_wallet: str,
        token_mint: str,
        actions: list[ActionPolicy],
    ) -> Instruction:
        return self._instruction(
            "init_config",
            self._config_args(fee_wallet, platform_wallet, token_mint, actions),
            [
                _meta(self.registry_address, is_writable=True),
                _meta(authority, is_signer=True, is_writable=True),
                _meta(SYSTEM_PROGRAM_ID),
            ],
        )

    def update_config(
        self,
        authority: str,
        fee_wallet: str,
        platform_wallet: str,
        token_mint: str,
        actions: list[ActionPolicy],
    ) -> Instruction:
        return self._instruction(
            "update_config",
            self._config_args(fee_wallet, platform_wallet, token_mint, actions),
            self._admin_accounts(authority),
        )

    def add_action(self, authority: str, action: ActionPolicy) -> Instruction:
        return self._instruction(
            "add_action", encode_action(action), self._admin_accounts(authority)
        )

    def update_action(self, authority: str, name: str, action: ActionPolicy) -> Instruction:
        return self._instruction(
            "update_action",
            encode_string(name) + encode_action(action),
            self._admin_accounts(authority),
        )

    def remove_action(self, authority: str, name: str) -> Instruction:
        return self._instruction(
            "remove_action", encode_string(name), self._admin_accounts(authority)
        )

    @staticmethod
    def _config_args(
        fee_wallet: str, platform_wallet: str, token_mint: str, actions: list[ActionPolicy]
    ) -> bytes:
        return (
            encode_pubkey(fee_wallet)
            + encode_pubkey(platform_wallet)
            + encode_pubkey(token_mint)
            + encode_actions(actions)
        )


def encode_registry_account(registry: Registry) -> bytes:
    """Serialize a registry the way the program stores it."""
    return (
        REGISTRY_ACCOUNT_DISCRIMINATOR
        + encode_u8(registry.bump)
        + encode_pubkey(registry.authority)
        + encode_pubkey(registry.fee_collector)
        + encode_pubkey(registry.platform_collector)
        + encode_pubkey(registry.asset)
        + encode_actions(registry.actions)
    )


def decode_registry_account(address: str, data: bytes) -> Registry:
    """Decode registry account data fetched from the chain.

    Trailing bytes (unused account space) are ignored.

    Raises:
        ValueError: If the discriminator does not match or data is truncated.
    """
    if data[:8] != REGISTRY_ACCOUNT_DISCRIMINATOR:
        raise ValueError("Account is not a registry (discriminator mismatch)")

    reader = BorshReader(data, offset=8)
    bump = reader.read_u8()
    return Registry(
        address=address,
        bump=bump,
        authority=reader.read_pubkey(),
        fee_collector=reader.read_pubkey(),
        platform_collector=reader.read_pubkey(),
        asset=reader.read_pubkey(),
        actions=reader.read_actions(),
    )
