import pytest
from pydantic import ValidationError

from knownevents.domain.enums import TxStatus
from knownevents.parser.utils.types import Amount, KnownEvent, Log, Receipt, TransactionCall

TOKEN = "0x2000000000000000000000000000000000000001"
ALICE = "0x1111111111111111111111111111111111111111"


class TestFromRpc:
    def test_log(self):
        log = Log.from_rpc({
            "address": TOKEN,
            "topics": ["0x01"],
            "data": "0x",
            "blockNumber": "0x10",
            "transactionHash": "0xabc",
            "logIndex": "0x3",
        })
        assert log.block_number == 16
        assert log.log_index == 3
        assert log.topics == ("0x01",)

    def test_receipt_status(self):
        ok = Receipt.from_rpc({"from": ALICE, "to": TOKEN, "status": "0x1", "logs": []})
        reverted = Receipt.from_rpc({"from": ALICE, "to": TOKEN, "status": "0x0", "logs": []})

        assert ok.status == TxStatus.SUCCESS
        assert reverted.status == TxStatus.REVERTED

    def test_receipt_named_status_and_creation(self):
        receipt = Receipt.from_rpc({"from": ALICE, "to": None, "status": "reverted", "contractAddress": TOKEN})
        assert receipt.status == TxStatus.REVERTED
        assert receipt.contract_address == TOKEN
        assert receipt.logs == []

    def test_receipt_null_status_is_success(self):
        receipt = Receipt.from_rpc({"from": ALICE, "to": TOKEN, "status": None})
        assert receipt.status == TxStatus.SUCCESS
        assert Receipt.from_rpc({"from": ALICE, "status": 0}).status == TxStatus.REVERTED

    def test_receipt_drops_malformed_logs(self):
        receipt = Receipt.from_rpc({
            "from": ALICE,
            "logs": [{"address": None, "topics": []}, {"address": TOKEN, "logIndex": "0x1"}],
        })
        assert [log.address for log in receipt.logs] == [TOKEN]
        assert receipt.logs[0].log_index == 1


class TestModels:
    def test_log_is_frozen(self):
        log = Log(address=TOKEN)
        with pytest.raises(ValidationError):
            log.data = "0x01"

    def test_amount_rejects_negative(self):
        with pytest.raises(ValidationError):
            Amount(token=TOKEN, value=-1)

    def test_known_event_needs_parts(self):
        with pytest.raises(ValidationError):
            KnownEvent(type="send", parts=[])

    def test_known_event_rejects_sentinel_type(self):
        with pytest.raises(ValidationError):
            KnownEvent(type="fee transfer", parts=[{"type": "action", "value": "Pay"}])

    def test_call_input_alias(self):
        assert TransactionCall(data="0x01").call_input == "0x01"
        assert TransactionCall(input="0x02", data="0x01").call_input == "0x02"
        assert TransactionCall().call_input is None
