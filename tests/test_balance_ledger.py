# tests/test_balance_ledger.py

from decimal import Decimal

from cosmos_indexer.database.tables import TransferEvent
from cosmos_indexer.ledger import AccountRegistry, BalanceLedger, TransferSide

from tests.conftest import ALICE, BOB, TOKEN, transfer_event


UINT128_MAX = "340282366920938463463374607431768211455"


def balance_of(db_manager, account, token=TOKEN):
    with db_manager.get_session() as session:
        row = db_manager.get_balance_repo().get_by_account_and_token(session, account, token)
        return row.amount if row else None


def history_of(db_manager, account, token=TOKEN):
    with db_manager.get_session() as session:
        return db_manager.get_balance_snapshot_repo().get_history(session, account, token)


class TestTransfers:

    def test_transfer_back_and_forth(self, dispatcher, db_manager, registered_token):
        dispatcher.dispatch(transfer_event(ALICE, BOB, "50", block_id="10"))
        dispatcher.dispatch(transfer_event(BOB, ALICE, "30", block_id="11"))

        assert balance_of(db_manager, ALICE) == Decimal(-20)
        assert balance_of(db_manager, BOB) == Decimal(20)

    def test_first_transfer_applies_sign_on_creation(self, dispatcher, db_manager, registered_token):
        dispatcher.dispatch(transfer_event(ALICE, BOB, "50", block_id="10"))

        assert balance_of(db_manager, ALICE) == Decimal(-50)
        assert balance_of(db_manager, BOB) == Decimal(50)

    def test_large_amounts_stay_exact(self, dispatcher, db_manager, registered_token):
        dispatcher.dispatch(transfer_event(ALICE, BOB, UINT128_MAX, block_id="10"))
        dispatcher.dispatch(transfer_event(ALICE, BOB, "1", block_id="11"))

        assert balance_of(db_manager, BOB) == Decimal("340282366920938463463374607431768211456")
        assert balance_of(db_manager, ALICE) == Decimal("-340282366920938463463374607431768211456")

    def test_self_transfer_nets_to_zero(self, dispatcher, db_manager, registered_token):
        dispatcher.dispatch(transfer_event(ALICE, ALICE, "50", block_id="10"))

        assert balance_of(db_manager, ALICE) == Decimal(0)
        assert [s.delta for s in history_of(db_manager, ALICE)] == [Decimal(-50), Decimal(50)]

    def test_send_moves_balance_to_contract(self, dispatcher, db_manager, registered_token):
        send = transfer_event(ALICE, BOB, "0", block_id="10")
        send.message.msg = {"send": {"contract": "juno1pool", "amount": "25", "msg": "e30="}}
        dispatcher.dispatch(send)

        assert balance_of(db_manager, ALICE) == Decimal(-25)
        assert balance_of(db_manager, "juno1pool") == Decimal(25)


class TestSnapshots:

    def test_one_snapshot_per_update_matching_balance(self, dispatcher, db_manager, registered_token):
        dispatcher.dispatch(transfer_event(ALICE, BOB, "50", block_id="10"))
        dispatcher.dispatch(transfer_event(BOB, ALICE, "30", block_id="11"))
        dispatcher.dispatch(transfer_event(ALICE, BOB, "5", block_id="12"))

        bob_history = history_of(db_manager, BOB)
        assert [s.amount for s in bob_history] == [Decimal(50), Decimal(20), Decimal(25)]
        assert [s.delta for s in bob_history] == [Decimal(50), Decimal(-30), Decimal(5)]
        assert bob_history[-1].amount == balance_of(db_manager, BOB)

        alice_history = history_of(db_manager, ALICE)
        assert [s.amount for s in alice_history] == [Decimal(-50), Decimal(-20), Decimal(-25)]

    def test_snapshot_links_transfer(self, dispatcher, db_manager, registered_token):
        event = transfer_event(ALICE, BOB, "50", block_id="10")
        dispatcher.dispatch(event)

        snapshot, = history_of(db_manager, BOB)
        assert snapshot.transfer_id == f"10-0-{event.tx.hash}"
        assert snapshot.block_height == event.tx.height


class TestBalanceLedger:

    def make_transfer(self, sender, destination, amount):
        return TransferEvent(id="t-1", token=TOKEN, amount=Decimal(amount),
                             sender=sender, destination=destination, block_height=1)

    def test_signed_delta_by_address(self):
        transfer = self.make_transfer(ALICE, BOB, "10")
        assert BalanceLedger.signed_delta(ALICE, transfer) == Decimal(-10)
        assert BalanceLedger.signed_delta(BOB, transfer) == Decimal(10)

    def test_signed_delta_explicit_side(self):
        transfer = self.make_transfer(ALICE, ALICE, "10")
        assert BalanceLedger.signed_delta(ALICE, transfer, TransferSide.SENDER) == Decimal(-10)
        assert BalanceLedger.signed_delta(ALICE, transfer, TransferSide.DESTINATION) == Decimal(10)

    def test_apply_transfer_creates_and_updates(self, db_manager, registered_token):
        ledger = BalanceLedger(db_manager)
        registry = AccountRegistry(db_manager)
        transfer = self.make_transfer(ALICE, BOB, "10")

        with db_manager.get_transaction() as session:
            bob = registry.get_or_create_account(session, BOB)
            first = ledger.apply_transfer(session, bob, TOKEN, TOKEN, transfer)
            assert first.amount == Decimal(10)
            second = ledger.apply_transfer(session, bob, TOKEN, TOKEN, transfer)
            assert second.amount == Decimal(20)
            assert db_manager.get_balance_repo().count(session) == 1

        assert len(history_of(db_manager, BOB)) == 2
