# tests/test_messages.py

from datetime import datetime, timezone

import msgspec
import pytest

from cosmos_indexer.types import (
    AddModules,
    AssetInfo,
    CreateAccount,
    Cw20Instantiate,
    ExecOnModule,
    Governance,
    InstallModule,
    ModuleReference,
    Send,
    Transfer,
    TxContext,
    UpdateAssetAddresses,
    decode_event,
    decode_execute_msg,
    split_asset_entry,
)

from tests.conftest import TOKEN, instantiate_event, make_event


class TestDecodeExecuteMsg:

    def test_transfer(self):
        msg = decode_execute_msg({"transfer": {"recipient": "juno1bob", "amount": "50"}})
        assert isinstance(msg, Transfer)
        assert msg.destination == "juno1bob"
        assert msg.amount == "50"

    def test_send_destination_is_contract(self):
        msg = decode_execute_msg({"send": {"contract": "juno1pool", "amount": "7", "msg": "e30="}})
        assert isinstance(msg, Send)
        assert msg.destination == "juno1pool"

    def test_add_modules_with_tagged_values(self):
        msg = decode_execute_msg({"add_modules": {"modules": [
            [{"namespace": "abstract", "name": "dex", "version": {"version": "1.2.0"}}, {"wasm": 42}],
            [{"namespace": "abstract", "name": "etf", "version": "latest"}, {"native": "juno1etf"}],
        ]}})

        assert isinstance(msg, AddModules)
        (dex, dex_ref), (etf, etf_ref) = msg.modules
        assert dex.id == "abstract:dex"
        assert str(dex.version) == "1.2.0"
        assert dex_ref == ModuleReference("wasm", "42")
        assert str(etf.version) == "latest"
        assert etf_ref == ModuleReference("native", "juno1etf")

    def test_create_account_governance_variants(self):
        monarchy = decode_execute_msg({"create_account": {
            "governance": {"Monarchy": {"monarch": "juno1alice"}}, "name": "a"}})
        external = decode_execute_msg({"create_account": {
            "governance": {"External": {"governance_address": "juno1dao"}}, "name": "b"}})

        assert isinstance(monarchy, CreateAccount)
        assert monarchy.governance == Governance("monarchy", "juno1alice")
        assert monarchy.description is None
        assert external.governance == Governance("external", "juno1dao")

    def test_update_asset_addresses(self):
        msg = decode_execute_msg({"update_asset_addresses": {
            "to_add": [["junoswap>juno", {"native": "ujuno"}]],
            "to_remove": [],
        }})
        assert isinstance(msg, UpdateAssetAddresses)
        assert msg.to_add == [("junoswap>juno", AssetInfo("native", "ujuno"))]

    def test_install_and_exec_on_module(self):
        install = decode_execute_msg({"install_module": {
            "module": {"namespace": "abstract", "name": "dex", "version": "latest"}, "init_msg": None}})
        execute = decode_execute_msg({"exec_on_module": {"module_id": "abstract:dex", "exec_msg": "e30="}})

        assert isinstance(install, InstallModule)
        assert install.module.name == "dex"
        assert isinstance(execute, ExecOnModule)
        assert execute.module_id == "abstract:dex"

    def test_exec_on_module_id_inside_exec_msg(self):
        execute = decode_execute_msg({"exec_on_module": {"exec_msg": {"module_id": "abstract:dex"}}})
        assert isinstance(execute, ExecOnModule)
        assert execute.module_id == "abstract:dex"

    def test_exec_on_module_top_level_id_wins(self):
        execute = decode_execute_msg({"exec_on_module": {
            "module_id": "abstract:etf", "exec_msg": {"module_id": "abstract:dex"}}})
        assert execute.module_id == "abstract:etf"

    def test_exec_on_module_without_id_rejected(self):
        with pytest.raises((msgspec.ValidationError, ValueError)):
            decode_execute_msg({"exec_on_module": {"exec_msg": "e30="}})

    def test_unknown_kind_is_none(self):
        assert decode_execute_msg({"increase_allowance": {"spender": "x", "amount": "1"}}) is None

    def test_multiple_keys_rejected(self):
        with pytest.raises(msgspec.ValidationError):
            decode_execute_msg({"transfer": {}, "send": {}})

    def test_missing_required_field_rejected(self):
        with pytest.raises(msgspec.ValidationError):
            decode_execute_msg({"transfer": {"amount": "1"}})


def test_split_asset_entry():
    assert split_asset_entry("junoswap>juno") == ("junoswap", "juno")
    assert split_asset_entry("juno") == (None, "juno")


def test_cw20_instantiate_decode():
    msg = Cw20Instantiate.decode({
        "name": "Test", "symbol": "TST", "decimals": 6,
        "initial_balances": [{"address": "juno1a", "amount": "10"}],
    })
    assert msg.mint is None
    assert msg.initial_balances[0].amount == "10"


class TestBlockTime:

    def tx(self, time):
        return msgspec.convert({"block_id": "1", "index": 0, "hash": "A", "height": 1, "time": time},
                               type=TxContext)

    def test_nanosecond_block_time(self):
        parsed = self.tx("2023-05-01T12:00:00.123456789Z").time
        assert parsed.replace(microsecond=0) == datetime(2023, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert 123456 <= parsed.microsecond <= 123457

    def test_short_fraction_and_offset(self):
        parsed = self.tx("2023-05-01T14:00:00.5+02:00").time
        assert parsed.microsecond == 500000
        assert parsed == datetime(2023, 5, 1, 12, 0, 0, 500000, tzinfo=timezone.utc)

    def test_block_time_requires_offset(self):
        with pytest.raises(msgspec.ValidationError):
            self.tx("2023-05-01T12:00:00")


class TestCosmosEvent:

    def test_decode_event_from_json(self):
        raw = msgspec.json.encode({
            "tx": {"block_id": "5", "index": 2, "hash": "ABC", "height": 5, "time": "2023-05-01T12:00:00Z"},
            "message": {"sender": "juno1alice", "contract": TOKEN,
                        "msg": {"transfer": {"recipient": "juno1bob", "amount": "1"}}},
        })
        event = decode_event(raw)
        assert event.tx.event_key == "5-2"
        assert event.message.kind == "execute"
        assert event.first_coin is None

    def test_instantiate_contract_address_from_sub_event(self):
        event = instantiate_event(address="juno1newtoken")
        assert event.message.contract is None
        assert event.contract_address == "juno1newtoken"

    def test_missing_attribute_is_none(self):
        event = make_event({"transfer": {"recipient": "juno1bob", "amount": "1"}})
        assert event.find_attribute("wasm-abstract", "manager_address") is None
