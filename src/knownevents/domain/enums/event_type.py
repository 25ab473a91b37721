from enum import Enum


class KnownEventType(str, Enum):
    """Vocabulary of classified transaction events. Values are the display keys."""

    # TIP-20 tokens
    SEND = "send"
    MINT = "mint"
    BURN = "burn"
    APPROVAL = "approval"
    BURN_BLOCKED = "burn blocked"
    GRANT_ROLE = "grant role"
    REVOKE_ROLE = "revoke role"
    ROLE_ADMIN_UPDATED = "role admin updated"
    PAUSE = "pause"
    UNPAUSE = "unpause"
    SUPPLY_CAP_UPDATE = "supply cap update"
    REWARD_RECIPIENT_SET = "reward recipient set"
    TRANSFER_POLICY_UPDATE = "transfer policy update"
    NEXT_QUOTE_TOKEN_SET = "next quote token set"
    QUOTE_TOKEN_UPDATE = "quote token update"
    CREATE_TOKEN = "create token"

    # Stablecoin DEX
    SWAP = "swap"
    ORDER_PLACED = "order placed"
    FLIP_ORDER_PLACED = "flip order placed"
    ORDER_FILLED = "order filled"
    ORDER_CANCELLED = "order cancelled"
    CREATE_PAIR = "create pair"

    # TIP-403 policy registry
    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"
    POLICY_ADMIN_UPDATED = "policy admin updated"
    POLICY_CREATED = "policy created"

    # Fees
    FEE = "fee"
    SPONSOR_FEE = "sponsor fee"
    USER_TOKEN_SET = "user token set"
    VALIDATOR_TOKEN_SET = "validator token set"
    REBALANCE_SWAP = "rebalance swap"

    # Nonces and access keys
    NONCE_INCREMENTED = "nonce incremented"
    ACTIVE_KEY_COUNT_CHANGED = "active key count changed"
    AUTHORIZE_KEY = "authorize key"
    REVOKE_KEY = "revoke key"
    SPENDING_LIMIT_UPDATE = "spending limit update"

    # Validator config (silent calls)
    ADD_VALIDATOR = "add validator"
    UPDATE_VALIDATOR = "update validator"
    VALIDATOR_STATUS_UPDATE = "validator status update"
    CHANGE_OWNER = "change owner"

    # Fallbacks
    CONTRACT_CALL = "contract call"
    CONTRACT_CREATION = "contract creation"
    SELF_TRANSFER = "self transfer"


# Informational types hidden from limited/default listings
LOW_SIGNAL_EVENT_TYPES: frozenset[KnownEventType] = frozenset({
    KnownEventType.NONCE_INCREMENTED,
    KnownEventType.ACTIVE_KEY_COUNT_CHANGED,
})
