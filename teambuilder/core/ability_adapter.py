"""Raw set ability -> normalized Ability."""

from ..data.models.ability import Ability, AbilityVariable
from ..data.models.set_data import SetAbility
from .description_normalizer import normalize_description


def _pick_description(raw: SetAbility) -> str:
    desc = raw.description.strip()
    if not desc and raw.description_raw:
        desc = raw.description_raw.strip()

    if raw.variables.mapping:
        # Structured variables come with a description already in {Name} form.
        return desc

    # Only the primary description is rewritten; a descriptionRaw fallback is kept verbatim.
    clean = normalize_description(raw.description)
    return clean or desc


def _adapt_variables(raw: SetAbility) -> dict[str, AbilityVariable]:
    variables: dict[str, AbilityVariable] = {}

    if raw.variables.mapping:
        for name, v in raw.variables.mapping.items():
            variables[name] = AbilityVariable(
                name=name.strip(),
                type=v.type.strip(),
                values=v.values.numbers(),
                display_values=v.values.display(),
                scaling=v.scaling.primary().strip(),
                scalings=v.scaling.all(),
                css_class=v.css_class.strip(),
            )
    elif raw.variables.entries:
        for v in raw.variables.entries:
            variables[v.name] = AbilityVariable(
                name=v.name.strip(),
                values=v.value.numbers(),
                display_values=v.value.display(),
            )

    return variables


def adapt_ability(raw: SetAbility, icon: str = "") -> Ability:
    """Normalize a raw set ability.

    Args:
        raw: The decoded upstream ability.
        icon: Already resolved spell icon path, if any.

    Returns:
        Ability with a render-ready description and its variables keyed by
        name (last entry wins on duplicate names).
    """
    return Ability(
        name=raw.name.strip(),
        description=_pick_description(raw),
        description_raw=raw.description_raw.strip(),
        icon=icon,
        variables=_adapt_variables(raw),
    )
