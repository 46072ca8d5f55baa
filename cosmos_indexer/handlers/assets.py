# cosmos_indexer/handlers/assets.py

from sqlalchemy.orm import Session

from ..database.tables import Asset
from ..types import CosmosEvent, UpdateAssetAddresses, split_asset_entry
from .base import BaseHandler


class AssetHandler(BaseHandler):
    """Asset registrations on the ANS host (``update_asset_addresses``)"""

    label = "Execute ANS Event"
    message_types = (UpdateAssetAddresses,)
    contract_role = "ans_host"

    def __init__(self, db_manager, config):
        super().__init__(db_manager, config)
        self.assets = db_manager.get_asset_repo()

    def process(self, session: Session, event: CosmosEvent, msg: UpdateAssetAddresses) -> None:
        for entry, info in msg.to_add:
            source, name = split_asset_entry(entry)

            asset = Asset(
                id=f"{event.tx.event_key}-{entry}",
                sender=event.message.sender,
                source=source,
                name=name,
                type=info.kind,
                address=info.address,
                ans_host=event.message.contract,
                block_height=event.tx.height,
                timestamp=event.tx.time,
                tx_hash=event.tx.hash,
            )
            self.assets.save(session, asset)
            self.log_saved("Asset", event)
