"""Raw set champion -> Unit served to the builder page."""

from typing import Mapping, Optional

from ..data.slugs import trait_slug, unit_slug
from ..data.models.set_data import SetChampion, SetStats
from ..data.models.unit import Trait, Unit, UnitStats
from .ability_adapter import adapt_ability
from .stats_format import round_half_away


def _first_match(lookup: Mapping[str, str], *names: str) -> str:
    for name in names:
        path = lookup.get(unit_slug(name), "")
        if path:
            return path
    return ""


def adapt_stats(stats: SetStats) -> UnitStats:
    return UnitStats(
        hp=[round_half_away(v) for v in stats.hp.numbers()],
        damage=[round_half_away(v) for v in stats.damage.numbers()],
        armor=round_half_away(stats.armor),
        magic_resist=round_half_away(stats.magic_resist),
        attack_speed=stats.attack_speed,
        crit_chance=stats.crit_chance,
        crit_multiplier=stats.crit_multiplier,
        mana=round_half_away(stats.mana),
        initial_mana=round_half_away(stats.initial_mana),
        range=round_half_away(stats.range),
        ability_power=100,
    )


def adapt_champion(
    champion: SetChampion,
    trait_icons: Mapping[str, str],
    unit_images: Mapping[str, str],
    spell_icons: Mapping[str, str],
) -> Optional[Unit]:
    """Build a Unit from a raw champion and the local asset indexes.

    The portrait is looked up by name, then by API name, then falls back to
    the upstream portrait URL.

    Returns:
        The Unit, or None when no image can be resolved.
    """
    name = champion.name.strip()

    url = _first_match(unit_images, name, champion.api_name) or champion.icons.portrait
    if not url:
        return None

    spell_icon = _first_match(
        spell_icons, name, champion.api_name, champion.ability.spell_key
    )

    return Unit(
        name=name,
        cost=champion.cost,
        url=url,
        traits=[Trait(name=t, icon=trait_icons.get(trait_slug(t), "")) for t in champion.traits],
        ability=adapt_ability(champion.ability, icon=spell_icon),
        unlock=champion.unlock,
        unlock_description=champion.unlock_description,
        role=champion.role,
        stats=adapt_stats(champion.stats),
    )
