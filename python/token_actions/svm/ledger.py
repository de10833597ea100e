"""Solana ledger: issues SPL ``TransferChecked`` instructions over RPC."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

from solana.rpc.api import Client
from solana.exceptions import SolanaRpcException
from solana.rpc.core import RPCException
from solders.instruction import Instruction  # type: ignore
from solders.message import Message  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.signature import Signature  # type: ignore
from solders.transaction import Transaction  # type: ignore
from spl.token.constants import TOKEN_2022_PROGRAM_ID  # type: ignore
from spl.token.instructions import TransferCheckedParams, transfer_checked  # type: ignore

from ..constants import (
    ERR_CONFIRMATION_TIMEOUT,
    ERR_OWNER_MISMATCH,
    ERR_RPC,
    ERR_TRANSACTION_FAILED,
    ERR_UNKNOWN_ASSET,
)
from ..errors import TransferError
from .constants import CONFIRMATION_POLL_SECONDS, CONFIRMATION_TIMEOUT_SECONDS
from .signers import KeypairSigner

logger = logging.getLogger(__name__)


class SolanaLedger:
    """Ledger backed by a Solana cluster.

    The signer pays transaction fees and must be the authority of every
    transfer. Outside ``atomic()`` each transfer is sent as its own
    transaction; inside it the transfers are sent together as one.
    """

    def __init__(
        self,
        client: Client,
        signer: KeypairSigner,
        token_program: Pubkey = TOKEN_2022_PROGRAM_ID,
        confirmation_timeout: int = CONFIRMATION_TIMEOUT_SECONDS,
    ):
        self._client = client
        self._signer = signer
        self._token_program = token_program
        self._confirmation_timeout = confirmation_timeout
        self._pending: list[Instruction] | None = None
        self._decimals: dict[str, int] = {}
        self.last_signature: str | None = None

    def get_decimals(self, asset: str) -> int:
        if asset not in self._decimals:
            try:
                supply = self._client.get_token_supply(Pubkey.from_string(asset))
            except (SolanaRpcException, RPCException) as e:
                raise TransferError(ERR_RPC, f"Could not read mint {asset}: {e}") from e
            if getattr(supply, "value", None) is None:
                raise TransferError(ERR_UNKNOWN_ASSET, f"Unknown mint: {asset}")
            self._decimals[asset] = supply.value.decimals
        return self._decimals[asset]

    def transfer_checked(
        self,
        source: str,
        destination: str,
        authority: str,
        asset: str,
        amount: int,
        decimals: int,
    ) -> None:
        if authority != self._signer.address:
            raise TransferError(
                ERR_OWNER_MISMATCH,
                f"Signer {self._signer.address} cannot authorize for {authority}",
            )

        ix = transfer_checked(
            TransferCheckedParams(
                program_id=self._token_program,
                source=Pubkey.from_string(source),
                mint=Pubkey.from_string(asset),
                dest=Pubkey.from_string(destination),
                owner=self._signer.pubkey,
                amount=amount,
                decimals=decimals,
            )
        )

        if self._pending is not None:
            self._pending.append(ix)
            return
        self._send([ix])

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Collect transfers and send them in a single transaction."""
        if self._pending is not None:
            # Nested: the outer block sends
            yield
            return

        self._pending = []
        try:
            yield
            instructions = self._pending
        finally:
            self._pending = None

        if instructions:
            self._send(instructions)

    def _send(self, instructions: list[Instruction]) -> str:
        try:
            blockhash = self._client.get_latest_blockhash().value.blockhash
            message = Message.new_with_blockhash(instructions, self._signer.pubkey, blockhash)
            tx = self._signer.sign_transaction(Transaction.new_unsigned(message), blockhash)
            result = self._client.send_raw_transaction(bytes(tx))
        except (SolanaRpcException, RPCException) as e:
            raise TransferError(ERR_RPC, f"Transaction submission failed: {e}") from e

        signature = result.value
        if not self._wait_for_confirmation(signature):
            raise TransferError(ERR_CONFIRMATION_TIMEOUT, f"Not confirmed: {signature}")

        self.last_signature = str(signature)
        logger.info("Confirmed %d transfer(s) in %s", len(instructions), signature)
        return self.last_signature

    def _wait_for_confirmation(self, signature: Signature) -> bool:
        """Poll until the transaction is visible or the timeout expires.

        Raises:
            TransferError: The transaction landed but failed on chain.
        """
        start = time.time()
        while time.time() - start < self._confirmation_timeout:
            try:
                result = self._client.get_transaction(signature)
                if result.value:
                    meta = result.value.transaction.meta
                    if meta is not None and meta.err is not None:
                        raise TransferError(
                            ERR_TRANSACTION_FAILED, f"Transaction {signature} failed: {meta.err}"
                        )
                    return True
            except SolanaRpcException:
                logger.debug("Confirmation poll failed for %s", signature)
            time.sleep(CONFIRMATION_POLL_SECONDS)
        return False
