"""Constants shared by the token actions dispatcher."""

# Seed the registry address is derived from (one registry per program)
CONFIG_SEED = b"config"

# Program that owns the on-chain registry
DEFAULT_PROGRAM_ID = "D4b2rvBeV4sMAkPRZjytgzWoi1N57jFrrFq2oxDyGPtU"

# Fee percentages are whole percents
MAX_FEE_PERCENT = 100

# Amounts are unsigned 64-bit on the ledger
U64_MAX = 2**64 - 1

# Ledger failure reasons
ERR_ACCOUNT_NOT_FOUND = "account_not_found"
ERR_UNKNOWN_ASSET = "unknown_asset"
ERR_MINT_MISMATCH = "mint_mismatch"
ERR_OWNER_MISMATCH = "owner_mismatch"
ERR_DECIMALS_MISMATCH = "decimals_mismatch"
ERR_INSUFFICIENT_FUNDS = "insufficient_funds"
ERR_INVALID_TRANSFER_AMOUNT = "invalid_transfer_amount"
ERR_RPC = "rpc_error"
ERR_CONFIRMATION_TIMEOUT = "confirmation_timeout"
ERR_TRANSACTION_FAILED = "transaction_failed"
