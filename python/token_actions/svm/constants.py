"""Constants for the Solana (SVM) binding."""

# CAIP-2 network identifiers
SOLANA_MAINNET_CAIP2 = "solana:5eykt4UsFv8P8NJdTREpY1vzqKqZKvdp"
SOLANA_DEVNET_CAIP2 = "solana:EtWTRABZaYq6iMfeYKouRu166VU2xqa1"
SOLANA_TESTNET_CAIP2 = "solana:4uhcVJyU9pJkvQyS88uRDiswHXSCkY3z"

NETWORK_ALIASES = {
    "mainnet": SOLANA_MAINNET_CAIP2,
    "mainnet-beta": SOLANA_MAINNET_CAIP2,
    "devnet": SOLANA_DEVNET_CAIP2,
    "testnet": SOLANA_TESTNET_CAIP2,
}

NETWORK_CONFIGS = {
    SOLANA_MAINNET_CAIP2: {"rpc_url": "https://api.mainnet-beta.solana.com"},
    SOLANA_DEVNET_CAIP2: {"rpc_url": "https://api.devnet.solana.com"},
    SOLANA_TESTNET_CAIP2: {"rpc_url": "https://api.testnet.solana.com"},
}

# Base58 public key (32 bytes encodes to 32-44 chars)
SVM_ADDRESS_REGEX = r"^[1-9A-HJ-NP-Za-km-z]{32,44}$"

# Anchor discriminator namespaces
INSTRUCTION_NAMESPACE = "global"
ACCOUNT_NAMESPACE = "account"
REGISTRY_ACCOUNT_NAME = "Config"

# Transaction confirmation polling
CONFIRMATION_TIMEOUT_SECONDS = 30
CONFIRMATION_POLL_SECONDS = 2
