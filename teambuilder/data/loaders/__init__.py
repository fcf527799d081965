# Data Loaders
from .asset_indexer import (
    AssetIndexer,
    SPELL_INDEXER,
    TRAIT_INDEXER,
    UNIT_INDEXER,
)
from .units_loader import (
    LoadUnitsConfig,
    UnitsLoader,
    UnitsLoadError,
    read_set_file,
    sort_units_by_cost_and_name,
)

__all__ = [
    # Asset indexing
    "AssetIndexer",
    "SPELL_INDEXER",
    "TRAIT_INDEXER",
    "UNIT_INDEXER",
    # Unit loading
    "LoadUnitsConfig",
    "UnitsLoader",
    "UnitsLoadError",
    "read_set_file",
    "sort_units_by_cost_and_name",
]
