"""Identifiers and sample policies shared by the tests."""

from token_actions.types import ActionPolicy

AUTHORITY = "authority-wallet"
PAYER = "payer-wallet"
RECEIVER = "receiver-wallet"
FEE_WALLET = "fee-wallet"
PLATFORM_WALLET = "platform-wallet"
MINT = "street-credit-mint"
OTHER_MINT = "other-mint"

PAYER_ATA = "payer-ata"
RECEIVER_ATA = "receiver-ata"
FEE_ATA = "fee-ata"
PLATFORM_ATA = "platform-ata"


def default_actions() -> list[ActionPolicy]:
    return [
        ActionPolicy("boost", price=1000, fee_percent=10, is_platform_action=True),
        ActionPolicy("tip", price=0, fee_percent=5, is_variable=True),
        ActionPolicy("buy_song", price=500, fee_percent=0),
        ActionPolicy("upgrade", price=250, fee_percent=0, is_platform_action=True),
    ]
