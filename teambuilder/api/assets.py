"""
Versioned asset paths resolved from the build manifest.
"""

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetPaths:
    """CSS/JS bundle URLs used by the page template."""
    css: str = "/dist/app.css"
    js: str = "/dist/app.js"


def load_asset_manifest(path: str | Path) -> Optional[dict[str, str]]:
    """Read a manifest mapping logical names to fingerprinted files."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            manifest = json.load(f)
    except OSError as e:
        logger.warning(f"Asset manifest not found ({path}): {e}")
        return None
    except json.JSONDecodeError as e:
        logger.warning(f"Asset manifest parse error ({path}): {e}")
        return None

    if not isinstance(manifest, dict):
        logger.warning(f"Asset manifest is not an object ({path})")
        return None
    return manifest


class ManifestAssetResolver:
    """Resolves asset paths from a JSON manifest, with fallback defaults."""

    def __init__(self, manifest_path: str | Path, defaults: Optional[AssetPaths] = None):
        self.manifest_path = manifest_path
        self.defaults = defaults or AssetPaths()

    def resolve(self) -> AssetPaths:
        manifest = load_asset_manifest(self.manifest_path)
        return self.resolve_from_manifest(manifest)

    def resolve_from_manifest(self, manifest: Optional[dict]) -> AssetPaths:
        assets = self.defaults
        if not manifest:
            return assets

        css = manifest.get("app.css")
        if isinstance(css, str) and css.strip():
            assets = replace(assets, css=css.strip())
        js = manifest.get("app.js")
        if isinstance(js, str) and js.strip():
            assets = replace(assets, js=js.strip())
        return assets


class StaticAssetResolver:
    """Always returns fixed asset paths."""

    def __init__(self, assets: AssetPaths):
        self.assets = assets

    def resolve(self) -> AssetPaths:
        return self.assets
