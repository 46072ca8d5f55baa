# cosmos_indexer/database/repositories/asset_repository.py

from ..base_repository import BaseRepository
from ..tables.asset import Asset


class AssetRepository(BaseRepository[Asset]):
    """Repository for ANS asset registrations"""

    def __init__(self, db_manager):
        super().__init__(db_manager, Asset)
