"""Signers for the Solana (SVM) binding."""

from solders.hash import Hash  # type: ignore
from solders.keypair import Keypair  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.transaction import Transaction  # type: ignore


class KeypairSigner:
    """Signs transactions with a local keypair."""

    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @property
    def address(self) -> str:
        """Base58 public key."""
        return str(self._keypair.pubkey())

    @property
    def pubkey(self) -> Pubkey:
        return self._keypair.pubkey()

    @property
    def keypair(self) -> Keypair:
        return self._keypair

    @classmethod
    def from_base58(cls, private_key: str) -> "KeypairSigner":
        return cls(Keypair.from_base58_string(private_key))

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> "KeypairSigner":
        return cls(Keypair.from_bytes(key_bytes))

    def sign_transaction(self, tx: Transaction, recent_blockhash: Hash) -> Transaction:
        """Sign a transaction in place and return it."""
        tx.sign([self._keypair], recent_blockhash)
        return tx
