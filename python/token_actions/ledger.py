"""Ledger interface consumed by the dispatcher, and an in-memory ledger.

A ledger moves token balances between accounts and knows the decimal
precision of every asset it holds. ``atomic()`` groups transfers into one
all-or-nothing unit of work.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Protocol

from .constants import (
    ERR_ACCOUNT_NOT_FOUND,
    ERR_DECIMALS_MISMATCH,
    ERR_INSUFFICIENT_FUNDS,
    ERR_INVALID_TRANSFER_AMOUNT,
    ERR_MINT_MISMATCH,
    ERR_OWNER_MISMATCH,
    ERR_UNKNOWN_ASSET,
)
from .errors import TransferError

logger = logging.getLogger(__name__)


class TransferLedger(Protocol):
    """Protocol for the external transfer primitive."""

    def get_decimals(self, asset: str) -> int:
        """Decimal places of an asset (mint)."""
        ...

    def transfer_checked(
        self,
        source: str,
        destination: str,
        authority: str,
        asset: str,
        amount: int,
        decimals: int,
    ) -> None:
        """Move ``amount`` of ``asset`` from ``source`` to ``destination``.

        Raises:
            TransferError: If the authority may not spend from ``source``,
                the balance is insufficient, or the asset/decimals disagree.
        """
        ...

    def atomic(self) -> Iterator[None]:
        """Context manager making the enclosed transfers all-or-nothing."""
        ...


@dataclass
class TokenAccount:
    """A token balance held by an owner."""

    owner: str
    mint: str
    amount: int = 0


class InMemoryLedger:
    """Ledger kept in process memory.

    Accounts are addressed by string identifiers. Used for local
    simulation and tests.
    """

    def __init__(self):
        self._mints: dict[str, int] = {}
        self._accounts: dict[str, TokenAccount] = {}

    def create_mint(self, mint: str, decimals: int) -> None:
        self._mints[mint] = decimals

    def create_account(self, address: str, owner: str, mint: str, amount: int = 0) -> TokenAccount:
        if mint not in self._mints:
            raise TransferError(ERR_UNKNOWN_ASSET, f"Unknown mint: {mint}")
        account = TokenAccount(owner=owner, mint=mint, amount=amount)
        self._accounts[address] = account
        return account

    def balance(self, address: str) -> int:
        return self._get_account(address).amount

    def get_decimals(self, asset: str) -> int:
        try:
            return self._mints[asset]
        except KeyError:
            raise TransferError(ERR_UNKNOWN_ASSET, f"Unknown mint: {asset}") from None

    def transfer_checked(
        self,
        source: str,
        destination: str,
        authority: str,
        asset: str,
        amount: int,
        decimals: int,
    ) -> None:
        if amount < 0:
            raise TransferError(ERR_INVALID_TRANSFER_AMOUNT, f"Negative amount: {amount}")

        src = self._get_account(source)
        dest = self._get_account(destination)

        if src.mint != asset or dest.mint != asset:
            raise TransferError(ERR_MINT_MISMATCH, f"Accounts do not hold {asset}")
        if self.get_decimals(asset) != decimals:
            raise TransferError(
                ERR_DECIMALS_MISMATCH,
                f"Expected {self._mints[asset]} decimals, got {decimals}",
            )
        if src.owner != authority:
            raise TransferError(ERR_OWNER_MISMATCH, f"{authority} does not own {source}")
        if src.amount < amount:
            raise TransferError(
                ERR_INSUFFICIENT_FUNDS,
                f"Balance {src.amount} < {amount} in {source}",
            )

        src.amount -= amount
        dest.amount += amount
        logger.debug("Moved %d %s from %s to %s", amount, asset, source, destination)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Restore every balance if the enclosed block raises."""
        snapshot = {address: account.amount for address, account in self._accounts.items()}
        try:
            yield
        except Exception:
            for address, amount in snapshot.items():
                self._accounts[address].amount = amount
            logger.debug("Rolled back ledger to snapshot of %d accounts", len(snapshot))
            raise

    def _get_account(self, address: str) -> TokenAccount:
        try:
            return self._accounts[address]
        except KeyError:
            raise TransferError(ERR_ACCOUNT_NOT_FOUND, f"Unknown account: {address}") from None
