"""Unit data loader for the team builder."""

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ...core.champion_adapter import adapt_champion
from ..models.set_data import SetFile
from ..models.unit import Unit, UnitsData
from .asset_indexer import SPELL_INDEXER, TRAIT_INDEXER, UNIT_INDEXER

logger = logging.getLogger(__name__)

DEFAULT_SET_DATA_PATH = "data/set16_champions.json"
DEFAULT_TRAIT_DIR = "static/assets/Traits/SET16"
DEFAULT_UNIT_DIR = "static/assets/Units/SET16"
DEFAULT_SPELL_DIR = "static/assets/Spells/SET16/webp-64"


class UnitsLoadError(Exception):
    """The set data file could not be read or decoded."""


@dataclass(frozen=True)
class LoadUnitsConfig:
    """Where the loader reads the set file and local assets from."""
    set_data_path: str = DEFAULT_SET_DATA_PATH
    trait_dir: str = DEFAULT_TRAIT_DIR
    unit_dir: str = DEFAULT_UNIT_DIR
    spell_dir: str = DEFAULT_SPELL_DIR


def read_set_file(path: str | Path) -> SetFile:
    """Read and decode the generated set JSON.

    Raises:
        UnitsLoadError: If the file is missing, is not JSON, or holds values
            of an unsupported shape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise UnitsLoadError(f"read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise UnitsLoadError(f"decode {path}: {e}") from e

    try:
        return SetFile.model_validate(raw)
    except ValidationError as e:
        raise UnitsLoadError(f"decode {path}: {e}") from e


def sort_units_by_cost_and_name(units: list[Unit]) -> None:
    """Sort in place by cost, then name."""
    units.sort(key=lambda u: (u.cost, u.name))


class UnitsLoader:
    """File-based unit source, loaded once per process.

    The first call to :meth:`load_units` reads the set file and asset
    directories; later calls return the same snapshot (or re-raise the same
    error).
    """

    def __init__(self, config: Optional[LoadUnitsConfig] = None):
        self.config = config or LoadUnitsConfig()
        self._lock = threading.Lock()
        self._loaded = False
        self._data: Optional[UnitsData] = None
        self._error: Optional[UnitsLoadError] = None

    def load_units(self) -> UnitsData:
        with self._lock:
            if not self._loaded:
                try:
                    self._data = self._load_from_disk()
                except UnitsLoadError as e:
                    self._error = e
                self._loaded = True

        if self._error is not None:
            raise self._error
        return self._data

    def _load_from_disk(self) -> UnitsData:
        cfg = self.config
        data = read_set_file(cfg.set_data_path)

        trait_icons = TRAIT_INDEXER.index(cfg.trait_dir)
        unit_images = UNIT_INDEXER.index(cfg.unit_dir)
        spell_icons = SPELL_INDEXER.index(cfg.spell_dir)

        units = []
        for champion in data.champions:
            unit = adapt_champion(champion, trait_icons, unit_images, spell_icons)
            if unit is None:
                logger.warning(f"Skipping champion without image: {champion.name!r}")
                continue
            units.append(unit)

        sort_units_by_cost_and_name(units)
        logger.info(f"Loaded {len(units)} units from {cfg.set_data_path}")
        return UnitsData(units=units)
