# tests/test_ledger.py

import logging
from decimal import Decimal

from cosmos_indexer.database.tables import Account
from cosmos_indexer.ledger import AccountRegistry, AddressVerifier, TokenLedger

from tests.conftest import (
    ALICE,
    BOB,
    CREATOR,
    FACTORY,
    MANAGER,
    PROXY,
    TOKEN,
    instantiate_event,
    transfer_event,
)


class TestTokenLedger:

    def test_instantiate_registers_token(self, dispatcher, db_manager):
        event = instantiate_event(initial_balances=[
            {"address": ALICE, "amount": "600"},
            {"address": BOB, "amount": "400"},
        ])
        assert dispatcher.dispatch(event) == 1

        with db_manager.get_session() as session:
            token = TokenLedger(db_manager, dispatcher.config).get_token_by_address(session, TOKEN)
            assert token.symbol == "TEST"
            assert token.decimals == 6
            assert token.source == CREATOR
            assert token.minter == CREATOR
            assert token.total_supply == Decimal(1000)
            assert token.transfer_event_count == 0
            assert token.total_transferred == Decimal(0)

            # initial balances are not seeded as AccountBalance rows
            assert db_manager.get_balance_repo().count(session) == 0

    def test_unrecognized_code_id_is_skipped(self, dispatcher, db_manager):
        dispatcher.dispatch(instantiate_event(code_id=999))

        with db_manager.get_session() as session:
            assert db_manager.get_token_repo().count(session) == 0

    def test_token_without_minter(self, dispatcher, db_manager):
        dispatcher.dispatch(instantiate_event(minter=None))

        with db_manager.get_session() as session:
            assert db_manager.get_token_repo().get_by_address(session, TOKEN).minter is None

    def test_transfer_statistics(self, dispatcher, db_manager, registered_token):
        dispatcher.dispatch(transfer_event(ALICE, BOB, "50", block_id="10"))
        dispatcher.dispatch(transfer_event(BOB, ALICE, "30", block_id="11"))

        with db_manager.get_session() as session:
            token = db_manager.get_token_repo().get_by_address(session, TOKEN)
            assert token.transfer_event_count == 2
            assert token.total_transferred == Decimal(80)
            assert token.block_height == 100

            transfers = db_manager.get_transfer_event_repo().get_by_token(session, TOKEN)
            assert sorted(t.amount for t in transfers) == [Decimal(30), Decimal(50)]

    def test_reinstantiate_keeps_counters(self, dispatcher, db_manager, registered_token, caplog):
        dispatcher.dispatch(transfer_event(ALICE, BOB, "50", block_id="10"))

        with caplog.at_level(logging.WARNING, logger="cosmos_indexer"):
            dispatcher.dispatch(instantiate_event(block_id="11"))

        assert any(record.levelno == logging.WARNING and "already registered" in record.getMessage()
                   for record in caplog.records)

        with db_manager.get_session() as session:
            tokens = db_manager.get_token_repo().get_all(session)
            assert [t.address for t in tokens] == [TOKEN]
            assert tokens[0].transfer_event_count == 1
            assert tokens[0].total_transferred == Decimal(50)

    def test_transfer_on_unregistered_token_records_nothing(self, dispatcher, db_manager):
        dispatcher.dispatch(transfer_event(ALICE, BOB, "50", token="juno1unknown"))

        with db_manager.get_session() as session:
            assert db_manager.get_transfer_event_repo().count(session) == 0
            assert db_manager.get_balance_repo().count(session) == 0
            assert db_manager.get_balance_snapshot_repo().count(session) == 0
            assert db_manager.get_account_repo().count(session) == 0

    def test_record_transfer_unknown_token(self, db_manager, config):
        ledger = TokenLedger(db_manager, config)
        with db_manager.get_transaction() as session:
            assert ledger.record_transfer(session, "juno1unknown", "5") is None


class TestAccountRegistry:

    def test_get_or_create_is_idempotent(self, db_manager):
        registry = AccountRegistry(db_manager)

        with db_manager.get_transaction() as session:
            first = registry.get_or_create_account(session, ALICE)
            second = registry.get_or_create_account(session, ALICE)
            assert first is second
            assert first.id == ALICE
            assert db_manager.get_account_repo().count(session) == 1

    def test_transfer_creates_accounts_lazily(self, dispatcher, db_manager, registered_token):
        dispatcher.dispatch(transfer_event(ALICE, BOB, "50", block_id="10"))
        dispatcher.dispatch(transfer_event(ALICE, BOB, "5", block_id="11"))

        with db_manager.get_session() as session:
            accounts = db_manager.get_account_repo()
            assert accounts.count(session) == 2
            assert accounts.get_by_address(session, ALICE).manager is None

    def test_existing_governance_account_is_not_overwritten(self, db_manager, governance_account):
        registry = AccountRegistry(db_manager)

        with db_manager.get_transaction() as session:
            account = registry.get_or_create_account(session, FACTORY)
            assert account.is_governance_account
            assert account.manager == MANAGER
            assert db_manager.get_account_repo().count(session) == 1


class TestAddressVerifier:

    def test_manager_and_proxy_are_known(self, db_manager, governance_account):
        verifier = AddressVerifier(db_manager)

        with db_manager.get_session() as session:
            assert verifier.is_known_address(session, MANAGER)
            assert verifier.is_known_address(session, PROXY)

    def test_primary_address_is_not_known(self, db_manager, governance_account):
        verifier = AddressVerifier(db_manager)

        with db_manager.get_session() as session:
            assert not verifier.is_known_address(session, FACTORY)
            assert not verifier.is_known_address(session, ALICE)
            assert not verifier.is_known_address(session, None)

    def test_holder_accounts_are_not_known(self, db_manager):
        with db_manager.get_transaction() as session:
            db_manager.get_account_repo().create(session, id=BOB, address=BOB)

        with db_manager.get_session() as session:
            assert not AddressVerifier(db_manager).is_known_address(session, BOB)
            assert isinstance(db_manager.get_account_repo().get_by_id(session, BOB), Account)


def test_database_health_check(db_manager):
    assert db_manager.health_check() is True
