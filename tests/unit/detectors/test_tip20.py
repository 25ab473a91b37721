from eth_utils import keccak

from knownevents.config import settings
from knownevents.domain.enums import KnownEventType
from knownevents.parser.decoder import decode_log, encode_log, pad_memo
from knownevents.parser.detectors.tip20 import Tip20Detector
from knownevents.parser.engine import classify_event
from knownevents.parser.utils.addresses import ZERO_ADDRESS
from knownevents.parser.utils.context import DetectionContext
from knownevents.parser.utils.pairing import mint_key
from knownevents.parser.utils.types import FeeTransfer

TOKEN = "0x2000000000000000000000000000000000000001"
QUOTE = "0x2000000000000000000000000000000000000002"
ALICE = "0x1111111111111111111111111111111111111111"
BOB = "0x2222222222222222222222222222222222222222"


def _make_event(name: str, **args):
    return decode_log(encode_log(name, TOKEN, **args))


def _classify(name: str, **args):
    return classify_event(encode_log(name, TOKEN, **args))


class TestTransfer:
    def test_send(self):
        event = _classify("Transfer", from_=ALICE, to=BOB, amount=100)

        assert event.type == KnownEventType.SEND
        assert [p.type for p in event.parts] == ["action", "amount", "text", "account"]
        assert event.parts[0].value == "Send"
        assert event.parts[1].value.value == 100
        assert event.parts[1].value.token == TOKEN
        assert event.parts[3].value == BOB
        assert event.meta.from_address == ALICE
        assert event.meta.to_address == BOB
        assert event.note is None

    def test_send_with_memo(self):
        event = _classify("TransferWithMemo", from_=ALICE, to=BOB, amount=100, memo=pad_memo("hi"))
        assert event.type == KnownEventType.SEND
        assert event.note == "hi"

    def test_enriched_amount(self, token_metadata):
        event = classify_event(
            encode_log("Transfer", TOKEN, from_=ALICE, to=BOB, amount=1_500_000),
            get_token_metadata=token_metadata,
        )
        amount = event.parts[1].value
        assert amount.decimals == 6
        assert amount.symbol == "AlphaUSD"

    def test_fee_transfer_sentinel(self):
        detector = Tip20Detector(DetectionContext())
        result = detector.detect(_make_event("Transfer", from_=ALICE, to=settings.fee_manager_address, amount=5))

        assert isinstance(result, FeeTransfer)
        assert result.amount == 5
        assert result.token == TOKEN

    def test_fee_transfer_is_none_in_single_event_mode(self):
        assert _classify("Transfer", from_=ALICE, to=settings.fee_manager_address, amount=5) is None

    def test_fee_transfer_paid_by_viewer_left_to_fee_payer(self):
        detector = Tip20Detector(DetectionContext(viewer=ALICE, transaction_sender=ALICE))
        event = _make_event("Transfer", from_=ALICE, to=settings.fee_manager_address, amount=5)
        assert detector.detect(event) is None

    def test_mint_into_fee_manager_is_a_send(self):
        event = _classify("Transfer", from_=ZERO_ADDRESS, to=settings.fee_manager_address, amount=5)
        assert event.type == KnownEventType.SEND


class TestMintBurn:
    def test_mint(self):
        event = _classify("Mint", to=ALICE, amount=50)
        assert event.type == KnownEventType.MINT
        assert event.parts[0].value == "Mint"
        assert event.parts[3].value == ALICE

    def test_mint_picks_up_memo(self):
        context = DetectionContext(mint_burn_memos={mint_key(TOKEN, 50, ALICE): "welcome"})
        event = Tip20Detector(context).detect(_make_event("Mint", to=ALICE, amount=50))
        assert event.note == "welcome"

    def test_mint_from_fee_manager_ignored(self):
        log = encode_log("Mint", settings.fee_manager_address, to=ALICE, amount=50)
        assert Tip20Detector(DetectionContext()).detect(decode_log(log)) is None

    def test_burn(self):
        event = _classify("Burn", from_=BOB, amount=7)
        assert event.type == KnownEventType.BURN
        assert [p.value for p in event.parts if p.type in ("action", "text")] == ["Burn", "from"]

    def test_burn_blocked(self):
        event = _classify("BurnBlocked", from_=BOB, amount=7)
        assert event.type == KnownEventType.BURN_BLOCKED
        assert event.parts[3].value == BOB


class TestAdministration:
    def test_grant_and_revoke_role(self):
        role = keccak(text="ISSUER_ROLE")
        granted = _classify("RoleMembershipUpdated", role=role, account=ALICE, sender=BOB, hasRole=True)
        revoked = _classify("RoleMembershipUpdated", role=role, account=ALICE, sender=BOB, hasRole=False)

        assert granted.type == KnownEventType.GRANT_ROLE
        assert granted.parts[0].value == "Grant Role"
        assert granted.parts[1].value == "0x" + role.hex()
        assert revoked.type == KnownEventType.REVOKE_ROLE

    def test_pause_and_unpause(self):
        paused = _classify("PauseStateUpdate", updater=ALICE, isPaused=True)
        resumed = _classify("PauseStateUpdate", updater=ALICE, isPaused=False)

        assert paused.type == KnownEventType.PAUSE
        assert paused.parts[0].value == "Pause Transfers"
        assert paused.parts[2].value.address == TOKEN
        assert resumed.type == KnownEventType.UNPAUSE
        assert resumed.parts[0].value == "Resume Transfers"

    def test_supply_cap_with_decimals(self, token_metadata):
        log = encode_log("SupplyCapUpdate", TOKEN, updater=ALICE, newSupplyCap=10**12)
        event = classify_event(log, get_token_metadata=token_metadata)

        assert event.type == KnownEventType.SUPPLY_CAP_UPDATE
        label, part = event.note[0]
        assert label == "New"
        assert part.value == (10**12, 6)
        assert event.parts[2].value.symbol == "AlphaUSD"

    def test_supply_cap_without_metadata(self):
        event = _classify("SupplyCapUpdate", updater=ALICE, newSupplyCap=10**12)
        assert event.note[0][1].value == 10**12

    def test_transfer_policy_update(self):
        event = _classify("TransferPolicyUpdate", updater=ALICE, newPolicyId=3)
        assert event.type == KnownEventType.TRANSFER_POLICY_UPDATE
        assert event.parts[1].value == "#3"
        assert event.note[0][0] == "Updater"

    def test_quote_tokens(self):
        next_quote = _classify("NextQuoteTokenSet", updater=ALICE, nextQuoteToken=QUOTE)
        updated = _classify("QuoteTokenUpdate", updater=ALICE, newQuoteToken=QUOTE)

        assert next_quote.type == KnownEventType.NEXT_QUOTE_TOKEN_SET
        assert next_quote.parts[1].value.address == QUOTE
        assert updated.type == KnownEventType.QUOTE_TOKEN_UPDATE

    def test_role_admin_updated(self):
        event = _classify(
            "RoleAdminUpdated", role=keccak(text="PAUSE_ROLE"), newAdminRole=b"\x00" * 32, sender=BOB,
        )
        assert event.type == KnownEventType.ROLE_ADMIN_UPDATED
        assert [p.type for p in event.parts] == ["action", "role", "text", "role"]

    def test_reward_recipient_and_approval(self):
        reward = _classify("RewardRecipientSet", holder=ALICE, recipient=BOB)
        approval = _classify("Approval", owner=ALICE, spender=BOB, amount=10)

        assert reward.type == KnownEventType.REWARD_RECIPIENT_SET
        assert reward.parts[1].value == BOB
        assert approval.type == KnownEventType.APPROVAL
        assert approval.parts[3].value == BOB
