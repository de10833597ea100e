"""Shared fixtures for token actions tests."""

import pytest

from token_actions.ledger import InMemoryLedger
from token_actions.registry import Registry

from .helpers import (
    AUTHORITY,
    FEE_ATA,
    FEE_WALLET,
    MINT,
    OTHER_MINT,
    PAYER,
    PAYER_ATA,
    PLATFORM_ATA,
    PLATFORM_WALLET,
    RECEIVER,
    RECEIVER_ATA,
    default_actions,
)


@pytest.fixture
def registry() -> Registry:
    return Registry.create(AUTHORITY, FEE_WALLET, PLATFORM_WALLET, MINT, default_actions())


@pytest.fixture
def ledger() -> InMemoryLedger:
    ledger = InMemoryLedger()
    ledger.create_mint(MINT, 6)
    ledger.create_mint(OTHER_MINT, 9)
    ledger.create_account(PAYER_ATA, owner=PAYER, mint=MINT, amount=10_000)
    ledger.create_account(RECEIVER_ATA, owner=RECEIVER, mint=MINT)
    ledger.create_account(FEE_ATA, owner=FEE_WALLET, mint=MINT)
    ledger.create_account(PLATFORM_ATA, owner=PLATFORM_WALLET, mint=MINT)
    return ledger
