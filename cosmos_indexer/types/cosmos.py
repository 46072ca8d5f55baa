# cosmos_indexer/types/cosmos.py

from datetime import datetime
from typing import Annotated, Optional, List, Dict, Any, Literal, Union

import msgspec
from msgspec import Meta, Struct

from .new import CosmosAddress, TxHash, BlockId, DenomStr, AmountStr


MessageKind = Literal["execute", "instantiate"]


# block header time: RFC 3339 with an offset, kept to microsecond precision
BlockTime = Annotated[datetime, Meta(tz=True)]


class Coin(Struct):
    denom: DenomStr
    amount: AmountStr

class EventAttribute(Struct):
    key: str
    value: str

class LogEvent(Struct):
    type: str
    attributes: List[EventAttribute] = []

    def get(self, key: str) -> Optional[str]:
        for attr in self.attributes:
            if attr.key == key:
                return attr.value
        return None

    def values(self, key: str) -> List[str]:
        return [attr.value for attr in self.attributes if attr.key == key]

class TxContext(Struct):
    block_id: BlockId
    index: int
    hash: TxHash
    height: int
    time: BlockTime

    @property
    def event_key(self) -> str:
        return f"{self.block_id}-{self.index}"

class ContractMessage(Struct):
    sender: CosmosAddress
    msg: Dict[str, Any]
    kind: MessageKind = "execute"
    contract: Optional[CosmosAddress] = None  # instantiate: resolved from sub-events
    code_id: Optional[int] = None
    label: Optional[str] = None
    funds: List[Coin] = []

class CosmosEvent(Struct):
    """One decoded contract message plus the sub-events its transaction emitted"""
    tx: TxContext
    message: ContractMessage
    events: List[LogEvent] = []

    def find_event(self, event_type: str) -> Optional[LogEvent]:
        for event in self.events:
            if event.type == event_type:
                return event
        return None

    def find_attribute(self, event_type: str, key: str) -> Optional[str]:
        event = self.find_event(event_type)
        return event.get(key) if event else None

    @property
    def contract_address(self) -> Optional[CosmosAddress]:
        if self.message.contract:
            return self.message.contract
        address = self.find_attribute("instantiate", "_contract_address")
        return CosmosAddress(address) if address else None

    @property
    def first_coin(self) -> Optional[Coin]:
        return self.message.funds[0] if self.message.funds else None


def decode_event(data: Union[bytes, str]) -> CosmosEvent:
    return msgspec.json.decode(data, type=CosmosEvent)
