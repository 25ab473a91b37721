"""Human-readable interfaces of the Tempo system contracts, grouped by family.

Events are listed as `Name(type [indexed] name, ...)`, functions as
`function name(type name, ...)`. The decoder builds its lookup tables from these.
"""

TIP20 = (
    "Transfer(address indexed from, address indexed to, uint256 amount)",
    "TransferWithMemo(address indexed from, address indexed to, uint256 amount, bytes32 indexed memo)",
    "Approval(address indexed owner, address indexed spender, uint256 amount)",
    "Mint(address indexed to, uint256 amount)",
    "Burn(address indexed from, uint256 amount)",
    "BurnBlocked(address indexed from, uint256 amount)",
    "RoleMembershipUpdated(bytes32 indexed role, address indexed account, address indexed sender, bool hasRole)",
    "RoleAdminUpdated(bytes32 indexed role, bytes32 indexed newAdminRole, address indexed sender)",
    "PauseStateUpdate(address indexed updater, bool isPaused)",
    "SupplyCapUpdate(address indexed updater, uint256 indexed newSupplyCap)",
    "TransferPolicyUpdate(address indexed updater, uint64 indexed newPolicyId)",
    "NextQuoteTokenSet(address indexed updater, address indexed nextQuoteToken)",
    "QuoteTokenUpdate(address indexed updater, address indexed newQuoteToken)",
    "RewardRecipientSet(address indexed holder, address indexed recipient)",
)

TIP20_FACTORY = (
    "TokenCreated(address indexed token, uint256 indexed id, string name, string symbol, string currency, address quoteToken, address admin)",
)

STABLECOIN_DEX = (
    "OrderPlaced(uint128 indexed orderId, address indexed maker, address indexed token, uint128 amount, bool isBid, int16 tick, bool isFlipOrder, int16 flipTick)",
    "FlipOrderPlaced(uint128 indexed orderId, address indexed maker, address indexed token, uint128 amount, bool isBid, int16 tick, int16 flipTick)",
    "OrderFilled(uint128 indexed orderId, address indexed maker, address indexed taker, uint128 amountFilled, bool partialFill)",
    "OrderCancelled(uint128 indexed orderId)",
    "PairCreated(bytes32 indexed key, address indexed base, address indexed quote)",
)

TIP403_REGISTRY = (
    "PolicyAdminUpdated(uint64 indexed policyId, address indexed updater, address indexed admin)",
    "PolicyCreated(uint64 indexed policyId, address indexed updater, uint8 policyType)",
    "WhitelistUpdated(uint64 indexed policyId, address indexed updater, address indexed account, bool allowed)",
    "BlacklistUpdated(uint64 indexed policyId, address indexed updater, address indexed account, bool restricted)",
)

FEE_MANAGER = (
    "UserTokenSet(address indexed user, address indexed token)",
    "ValidatorTokenSet(address indexed validator, address indexed token)",
)

FEE_AMM = (
    "Mint(address indexed sender, address indexed userToken, address indexed validatorToken, uint256 amountValidatorToken, uint256 liquidity)",
    "Burn(address indexed sender, address indexed userToken, address indexed validatorToken, uint256 amountUserToken, uint256 amountValidatorToken, uint256 liquidity, address to)",
    "RebalanceSwap(address indexed userToken, address indexed validatorToken, address indexed swapper, uint256 amountIn, uint256 amountOut)",
    "function mint(address userToken, address validatorToken, uint256 amountValidatorToken, address to)",
    "function burn(address userToken, address validatorToken, uint256 liquidity, address to)",
)

NONCE = (
    "NonceIncremented(address indexed account, uint256 indexed nonceKey, uint64 newNonce)",
    "ActiveKeyCountChanged(address indexed account, uint256 newCount)",
)

ACCOUNT_KEYCHAIN = (
    "KeyAuthorized(address indexed account, address indexed publicKey, uint8 signatureType, uint64 expiry)",
    "KeyRevoked(address indexed account, address indexed publicKey)",
    "SpendingLimitUpdated(address indexed account, address indexed publicKey, address indexed token, uint256 newLimit)",
)

VALIDATOR_CONFIG = (
    "function addValidator(address newValidatorAddress, bytes32 publicKey, bool active, string inboundAddress, string outboundAddress)",
    "function updateValidator(address newValidatorAddress, bytes32 publicKey, string inboundAddress, string outboundAddress)",
    "function changeValidatorStatus(address validator, bool active)",
    "function changeOwner(address newOwner)",
)

ABIS: dict[str, tuple[str, ...]] = {
    "tip20": TIP20,
    "tip20_factory": TIP20_FACTORY,
    "stablecoin_dex": STABLECOIN_DEX,
    "tip403_registry": TIP403_REGISTRY,
    "fee_manager": FEE_MANAGER,
    "fee_amm": FEE_AMM,
    "nonce": NONCE,
    "account_keychain": ACCOUNT_KEYCHAIN,
    "validator_config": VALIDATOR_CONFIG,
}
