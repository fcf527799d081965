"""Local asset lookup tables (trait icons, unit portraits, spell icons)."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..slugs import trait_slug, unit_slug

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetIndexer:
    """Builds slug -> path maps from a flat asset directory.

    Attributes:
        slug_func: Turns a file stem into a lookup key.
        filter_ext: Extensions to keep (with dot, any case); empty keeps all.
    """
    slug_func: Callable[[str], str] = unit_slug
    filter_ext: tuple[str, ...] = ()

    def index(self, directory: str | Path) -> dict[str, str]:
        """Scan ``directory`` (non-recursive) and map slugs to file paths.

        A missing directory yields an empty map.
        """
        root = Path(directory)
        if not root.is_dir():
            logger.debug(f"Asset directory not found: {root}")
            return {}

        allowed = {ext.lower() for ext in self.filter_ext}
        found: dict[str, str] = {}

        for entry in sorted(root.iterdir()):
            if entry.is_dir():
                continue
            if allowed and entry.suffix.lower() not in allowed:
                continue

            stem = entry.stem
            # Fingerprinted names such as "Ahri.CjTbL0xA.jpg"
            dot = stem.find(".")
            if dot > 0:
                stem = stem[:dot]

            found[self.slug_func(stem)] = (root / entry.name).as_posix()

        return found


TRAIT_INDEXER = AssetIndexer(slug_func=trait_slug)
UNIT_INDEXER = AssetIndexer(slug_func=unit_slug)
SPELL_INDEXER = AssetIndexer(slug_func=unit_slug, filter_ext=(".png", ".jpg", ".jpeg", ".webp"))
