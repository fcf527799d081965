"""
Jinja2 environment and template helpers for the builder page.
"""

from pathlib import PurePosixPath
from typing import Iterable, Optional

from fastapi.templating import Jinja2Templates

from ..core.ability_formatter import format_ability_description
from ..core.stats_format import format_attack_speed, format_int_list, format_mana, format_percent

DEFAULT_SRCSET_WIDTHS = (64, 256, 600)


def _is_absolute_url(path: str) -> bool:
    return path.startswith("http://") or path.startswith("https://")


def static_path(base: str, path: str) -> str:
    """Build the full URL of a static asset.

    >>> static_path("/static", "static/assets/Ahri.jpg")
    '/static/assets/Ahri.jpg'
    """
    if _is_absolute_url(path):
        return path

    b = base.strip() or "/static"
    b = "/" + b.strip("/")

    p = "/" + path.lstrip("/")
    p = p.removeprefix("/static")

    return b + p


def unit_webp_srcset(base: str, path: str, widths: Optional[Iterable[int]] = None) -> str:
    """srcset pointing at the generated ``webp-<width>`` variants of an image."""
    if not path or _is_absolute_url(path):
        return ""

    pure = PurePosixPath(path)
    if not pure.name or path.endswith("/"):
        return ""

    directory = path[: len(path) - len(pure.name)].rstrip("/")
    parts = []
    for width in widths or DEFAULT_SRCSET_WIDTHS:
        if width <= 0:
            continue
        webp_path = f"{directory}/webp-{width}/{pure.stem}.webp"
        parts.append(f"{static_path(base, webp_path)} {width}w")

    return ", ".join(parts)


def build_templates(directory: str) -> Jinja2Templates:
    """Create the template renderer with our filters and globals registered."""
    templates = Jinja2Templates(directory=directory)
    env = templates.env
    env.filters["format_ability"] = format_ability_description
    env.filters["format_percent"] = format_percent
    env.filters["format_attack_speed"] = format_attack_speed
    env.filters["format_int_list"] = format_int_list
    env.filters["format_mana"] = format_mana
    env.globals["static"] = static_path
    env.globals["unit_webp_srcset"] = unit_webp_srcset
    return templates
