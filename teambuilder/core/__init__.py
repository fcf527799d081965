# Ability rendering and data adaptation
from .ability_formatter import (
    CONTENT_FALLBACK_CHAIN,
    SCALING_ICON_CLASSES,
    format_ability_description,
    render_ability_value,
    select_ability_content,
)
from .description_normalizer import normalize_description
from .ability_adapter import adapt_ability
from .champion_adapter import adapt_champion, adapt_stats
from .stats_format import (
    format_attack_speed,
    format_int_list,
    format_mana,
    format_percent,
    round_half_away,
)

__all__ = [
    "CONTENT_FALLBACK_CHAIN",
    "SCALING_ICON_CLASSES",
    "format_ability_description",
    "render_ability_value",
    "select_ability_content",
    "normalize_description",
    "adapt_ability",
    "adapt_champion",
    "adapt_stats",
    "format_attack_speed",
    "format_int_list",
    "format_mana",
    "format_percent",
    "round_half_away",
]
