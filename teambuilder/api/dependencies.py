"""
Dependency injection for API services.
"""

from functools import lru_cache

from fastapi.templating import Jinja2Templates

from ..data.loaders import LoadUnitsConfig, UnitsLoader
from .assets import AssetPaths, ManifestAssetResolver
from .config import settings
from .templating import build_templates


@lru_cache()
def get_units_loader() -> UnitsLoader:
    """Get UnitsLoader singleton."""
    return UnitsLoader(
        LoadUnitsConfig(
            set_data_path=settings.SET_DATA_PATH,
            trait_dir=settings.TRAIT_ASSETS_DIR,
            unit_dir=settings.UNIT_ASSETS_DIR,
            spell_dir=settings.SPELL_ASSETS_DIR,
        )
    )


@lru_cache()
def get_asset_paths() -> AssetPaths:
    """Resolve versioned bundle paths once."""
    return ManifestAssetResolver(settings.ASSET_MANIFEST_PATH).resolve()


@lru_cache()
def get_templates() -> Jinja2Templates:
    """Get the template renderer singleton."""
    return build_templates(settings.TEMPLATES_DIR)


def build_canonical_url(site_url: str) -> str:
    """Site URL with exactly one trailing slash; empty stays empty."""
    canonical = site_url.strip().rstrip("/")
    return canonical + "/" if canonical else ""
