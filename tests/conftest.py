# tests/conftest.py
"""
pytest configuration and fixtures for the cosmos indexer

Every test gets its own in-memory SQLite database with the full schema.
"""

from typing import Any, Dict, List, Optional

import msgspec
import pytest

from cosmos_indexer.core.config import IndexerConfig
from cosmos_indexer.core.logging import IndexerLogger
from cosmos_indexer.database.connection import DatabaseManager
from cosmos_indexer.handlers import EventDispatcher
from cosmos_indexer.types import CosmosEvent


ALICE = "juno1alice"
BOB = "juno1bob"
CREATOR = "juno1creator"
TOKEN = "juno1token"
FACTORY = "juno1factory"
MANAGER = "juno1manager"
PROXY = "juno1proxy"
VERSION_CONTROL = "juno1versioncontrol"
ANS_HOST = "juno1anshost"

TOKEN_CODE_ID = 1
BLOCK_TIME = "2023-05-01T12:00:00.123456789Z"


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Route indexer logs through pytest's caplog only"""
    IndexerLogger.configure(log_level="DEBUG", console_enabled=False, file_enabled=False, force=True)
    yield


def build_config(**overrides) -> IndexerConfig:
    data: Dict[str, Any] = {
        "name": "test",
        "database": {"url": "sqlite://"},
        "code_ids": [TOKEN_CODE_ID],
        "logging": {"level": "DEBUG", "console_enabled": False},
    }
    data.update(overrides)
    return IndexerConfig.from_dict(data, env_vars={})


@pytest.fixture
def config() -> IndexerConfig:
    return build_config()


@pytest.fixture
def db_manager(config):
    manager = DatabaseManager(config.database)
    manager.initialize()
    manager.create_schema()
    yield manager
    manager.shutdown()


@pytest.fixture
def dispatcher(db_manager, config) -> EventDispatcher:
    return EventDispatcher(db_manager, config)


@pytest.fixture
def session(db_manager):
    with db_manager.get_session() as session:
        yield session


def make_event(msg: Dict[str, Any],
               *,
               sender: str = ALICE,
               contract: Optional[str] = TOKEN,
               kind: str = "execute",
               code_id: Optional[int] = None,
               funds: Optional[List[Dict[str, str]]] = None,
               events: Optional[List[Dict[str, Any]]] = None,
               block_id: str = "100",
               index: int = 0,
               tx_hash: Optional[str] = None,
               height: int = 100,
               time: str = BLOCK_TIME) -> CosmosEvent:
    data = {
        "tx": {
            "block_id": block_id,
            "index": index,
            "hash": tx_hash or f"TX{block_id}X{index}",
            "height": height,
            "time": time,
        },
        "message": {
            "sender": sender,
            "msg": msg,
            "kind": kind,
            "contract": contract,
            "code_id": code_id,
            "funds": funds or [],
        },
        "events": events or [],
    }
    return msgspec.convert(data, type=CosmosEvent)


def wasm_event(event_type: str, **attributes: str) -> Dict[str, Any]:
    return {
        "type": event_type,
        "attributes": [{"key": key, "value": value} for key, value in attributes.items()],
    }


def instantiate_event(address: str = TOKEN, code_id: int = TOKEN_CODE_ID,
                      initial_balances: Optional[List[Dict[str, str]]] = None,
                      minter: Optional[str] = CREATOR, **kwargs) -> CosmosEvent:
    msg: Dict[str, Any] = {
        "name": "Test Token",
        "symbol": "TEST",
        "decimals": 6,
        "initial_balances": initial_balances or [],
    }
    if minter:
        msg["mint"] = {"minter": minter}
    return make_event(
        msg,
        sender=CREATOR,
        contract=None,
        kind="instantiate",
        code_id=code_id,
        events=[wasm_event("instantiate", _contract_address=address, code_id=str(code_id))],
        **kwargs,
    )


def transfer_event(sender: str, recipient: str, amount: str, token: str = TOKEN, **kwargs) -> CosmosEvent:
    return make_event({"transfer": {"recipient": recipient, "amount": amount}},
                      sender=sender, contract=token, **kwargs)


def create_account_event(manager: str = MANAGER, proxy: str = PROXY,
                         funds: Optional[List[Dict[str, str]]] = None,
                         governance: Optional[Dict[str, Any]] = None, **kwargs) -> CosmosEvent:
    return make_event(
        {"create_account": {
            "governance": governance or {"Monarchy": {"monarch": ALICE}},
            "name": "Alice's account",
            "description": "treasury",
        }},
        sender=ALICE,
        contract=FACTORY,
        funds=funds,
        events=[wasm_event("wasm-abstract",
                           account_id="7",
                           manager_address=manager,
                           proxy_address=proxy,
                           admin=ALICE)],
        **kwargs,
    )


@pytest.fixture
def registered_token(dispatcher):
    """Token TOKEN registered through an instantiate message"""
    dispatcher.dispatch(instantiate_event(block_id="1"))
    return TOKEN


@pytest.fixture
def governance_account(dispatcher):
    """Governance account with MANAGER/PROXY created through the factory"""
    dispatcher.dispatch(create_account_event(block_id="2"))
    return FACTORY
