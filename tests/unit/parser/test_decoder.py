from eth_utils import keccak, to_checksum_address

from knownevents.parser.decoder import (
    EventSpec,
    FunctionSpec,
    decode_function_data,
    decode_log,
    decode_logs,
    default_registry,
    encode_function_data,
    encode_log,
    pad_memo,
    parse_signature,
)
from knownevents.parser.utils.types import Log

TOKEN = "0x2000000000000000000000000000000000000001"
ALICE = "0x1111111111111111111111111111111111111111"
BOB = "0x2222222222222222222222222222222222222222"
POOL = "0x3333333333333333333333333333333333333333"

ERC20_TRANSFER_TOPIC = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


class TestParseSignature:
    def test_event_topic0(self):
        spec = parse_signature("Transfer(address indexed from, address indexed to, uint256 amount)", "tip20")
        assert isinstance(spec, EventSpec)
        assert spec.topic0 == ERC20_TRANSFER_TOPIC
        assert [p.name for p in spec.indexed_params] == ["from", "to"]
        assert [p.name for p in spec.data_params] == ["amount"]

    def test_function_selector(self):
        spec = parse_signature("function transfer(address to, uint256 amount)", "tip20")
        assert isinstance(spec, FunctionSpec)
        assert spec.selector == "0xa9059cbb"

    def test_unnamed_params_get_positional_names(self):
        spec = parse_signature("Ping(uint256, address indexed)", "test")
        assert [p.name for p in spec.params] == ["arg0", "arg1"]
        assert spec.params[1].indexed is True

    def test_reused_event_names_have_distinct_topics(self):
        registry = default_registry()
        tip20_mint = registry.find_event("Mint", family="tip20")
        amm_mint = registry.find_event("Mint", family="fee_amm")
        assert tip20_mint.topic0 != amm_mint.topic0


class TestDecodeLog:
    def test_decode_transfer(self):
        log = encode_log("Transfer", TOKEN, from_=ALICE, to=BOB, amount=100, log_index=3)
        event = decode_log(log)

        assert event is not None
        assert event.event_name == "Transfer"
        assert event.args == {"from": ALICE, "to": BOB, "amount": 100}
        assert event.log_index == 3
        assert event.topics[0] == ERC20_TRANSFER_TOPIC

    def test_addresses_are_checksummed(self):
        log = encode_log("UserTokenSet", POOL, user=ALICE, token="0xfeec000000000000000000000000000000000000")
        event = decode_log(log)
        assert event.args["token"] == to_checksum_address("0xfeec000000000000000000000000000000000000")
        assert event.args["token"] != "0xfeec000000000000000000000000000000000000"

    def test_topics_are_lowercased(self):
        log = encode_log("Transfer", TOKEN, from_=ALICE, to=BOB, amount=1)
        upper = Log(address=TOKEN, topics=tuple(t.upper().replace("0X", "0x") for t in log.topics), data=log.data)
        event = decode_log(upper)
        assert event is not None
        assert all(t == t.lower() for t in event.topics)

    def test_memo_becomes_hex(self):
        log = encode_log("TransferWithMemo", TOKEN, from_=ALICE, to=BOB, amount=1, memo=pad_memo("hi"))
        event = decode_log(log)
        assert event.args["memo"] == "0x" + pad_memo("hi").hex()

    def test_tip20_mint_vs_fee_amm_mint(self):
        tip20 = decode_log(encode_log("Mint", TOKEN, to=ALICE, amount=50))
        amm = decode_log(encode_log(
            "Mint", POOL,
            sender=ALICE, userToken=TOKEN, validatorToken=BOB, amountValidatorToken=7, liquidity=3,
        ))

        assert tip20.event_name == amm.event_name == "Mint"
        assert set(tip20.args) == {"to", "amount"}
        assert amm.args["amountValidatorToken"] == 7

    def test_negative_tick(self):
        log = encode_log(
            "OrderPlaced", POOL,
            orderId=1, maker=ALICE, token=TOKEN, amount=10, isBid=True, tick=-20, isFlipOrder=False, flipTick=0,
        )
        assert decode_log(log).args["tick"] == -20

    def test_unknown_topic_returns_none(self):
        log = Log(address=TOKEN, topics=("0x" + "ab" * 32,), data="0x")
        assert decode_log(log) is None

    def test_no_topics_returns_none(self):
        assert decode_log(Log(address=TOKEN)) is None

    def test_wrong_topic_count_returns_none(self):
        log = encode_log("Transfer", TOKEN, from_=ALICE, to=BOB, amount=1)
        assert decode_log(Log(address=TOKEN, topics=log.topics[:2], data=log.data)) is None

    def test_short_data_returns_none(self):
        log = encode_log("Transfer", TOKEN, from_=ALICE, to=BOB, amount=1)
        assert decode_log(Log(address=TOKEN, topics=log.topics, data="0x1234")) is None

    def test_garbage_data_returns_none(self):
        log = encode_log("Transfer", TOKEN, from_=ALICE, to=BOB, amount=1)
        assert decode_log(Log(address=TOKEN, topics=log.topics, data="0xzz")) is None

    def test_invalid_emitter_returns_none(self):
        log = encode_log("Transfer", TOKEN, from_=ALICE, to=BOB, amount=1)
        assert decode_log(Log(address="not-an-address", topics=log.topics, data=log.data)) is None

    def test_decode_logs_skips_unknown(self):
        logs = [
            Log(address=TOKEN, topics=("0x" + "00" * 32,)),
            encode_log("Transfer", TOKEN, from_=ALICE, to=BOB, amount=1),
        ]
        events = decode_logs(logs)
        assert [e.event_name for e in events] == ["Transfer"]


class TestFunctionData:
    def test_decode_fee_amm_mint(self):
        data = encode_function_data(
            "fee_amm", "mint", userToken=TOKEN, validatorToken=BOB, amountValidatorToken=1000, to=ALICE,
        )
        spec, args = decode_function_data("fee_amm", data)
        assert spec.name == "mint"
        assert args["validatorToken"] == BOB
        assert args["amountValidatorToken"] == 1000

    def test_unknown_selector(self):
        assert decode_function_data("fee_amm", "0xdeadbeef") is None

    def test_too_short(self):
        assert decode_function_data("fee_amm", "0x12") is None

    def test_none_input(self):
        assert decode_function_data("fee_amm", None) is None

    def test_truncated_arguments(self):
        data = encode_function_data("validator_config", "changeOwner", newOwner=ALICE)
        assert decode_function_data("validator_config", data[:20]) is None


class TestPadMemo:
    def test_left_padded(self):
        memo = pad_memo("hi")
        assert len(memo) == 32
        assert memo.endswith(b"hi")
        assert memo[:30] == b"\x00" * 30

    def test_bytes_input(self):
        assert pad_memo(b"\x01") == b"\x00" * 31 + b"\x01"

    def test_role_hash_roundtrips_as_bytes32(self):
        role = keccak(text="ISSUER_ROLE")
        event = decode_log(encode_log(
            "RoleMembershipUpdated", TOKEN, role=role, account=ALICE, sender=BOB, hasRole=True,
        ))
        assert event.args["role"] == "0x" + role.hex()
