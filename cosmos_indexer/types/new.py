# cosmos_indexer/types/new.py

from typing import NewType


CosmosAddress = NewType("CosmosAddress", str)  # bech32, e.g. juno1...
TxHash = NewType("TxHash", str)
BlockId = NewType("BlockId", str)
DenomStr = NewType("DenomStr", str)
AmountStr = NewType("AmountStr", str)  # Uint128 as decimal string
