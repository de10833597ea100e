"""E2E dispatch client against a Solana cluster.

Reads the registry from the chain, then pays an action from the authority's
token account through the off-chain dispatcher. Configured through
TOKEN_ACTIONS_* environment variables (see token_actions.config).
"""

import json
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

ACTION = os.getenv("ACTION", "tip")
AMOUNT = int(os.getenv("AMOUNT", "1000000"))
RECEIVER = os.getenv("RECEIVER", "")


def main() -> None:
    """Run one dispatch and print the emitted record."""
    from solana.rpc.api import Client
    from solders.pubkey import Pubkey

    from token_actions import ActionDispatcher, DispatcherConfig, TokenActionsSettings
    from token_actions.svm import KeypairSigner, derive_ata
    from token_actions.svm.ledger import SolanaLedger
    from token_actions.svm.program import RegistryProgram, decode_registry_account

    settings = TokenActionsSettings.from_env()
    logging.basicConfig(level=settings.log_level)

    if not settings.authority_private_key:
        print("TOKEN_ACTIONS_AUTHORITY_PRIVATE_KEY environment variable is required")
        sys.exit(1)

    client = Client(settings.resolve_rpc_url())
    signer = KeypairSigner.from_base58(settings.authority_private_key)

    program = RegistryProgram(settings.program_id)
    info = client.get_account_info(Pubkey.from_string(program.registry_address))
    if info.value is None:
        print(f"No registry at {program.registry_address}")
        sys.exit(1)
    registry = decode_registry_account(program.registry_address, bytes(info.value.data))

    ledger = SolanaLedger(client, signer)
    dispatcher = ActionDispatcher(
        ledger,
        DispatcherConfig(event_callbacks=[lambda record: print(json.dumps(record.to_dict()))]),
    )

    mint = registry.asset
    payer_ata = derive_ata(signer.address, mint)
    fee_ata = derive_ata(registry.fee_collector, mint)
    policy = registry.find_action(ACTION)

    if policy.is_platform_action:
        dispatcher.platform_dispatch(
            registry,
            ACTION,
            mint,
            payer_ata,
            derive_ata(registry.platform_collector, mint),
            fee_ata,
            signer.address,
        )
    else:
        if not RECEIVER:
            print("RECEIVER environment variable is required for user actions")
            sys.exit(1)
        dispatcher.user_dispatch(
            registry,
            ACTION,
            mint,
            AMOUNT,
            payer_ata,
            derive_ata(RECEIVER, mint),
            fee_ata,
            signer.address,
        )

    print(f"Transaction: {ledger.last_signature}")


if __name__ == "__main__":
    main()
