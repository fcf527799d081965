"""Ability description rendering.

Turns a normalized :class:`Ability` into an HTML fragment: the description is
escaped first, then placeholder tokens are replaced with rendered variable
values. Four token forms are supported and resolved in this order:

1. parenthesized groups holding an ``@token@`` (wrapped in scaling spans),
2. ``@Name@`` / ``@Name.field@``,
3. ``{Name}`` / ``{Name.field}``.

Tokens naming an unknown variable are left untouched so data issues stay
visible on the page.
"""

import re
from typing import Callable, Final, Mapping

from markupsafe import Markup, escape

from ..data.models.ability import Ability, AbilityVariable
from ..data.models.set_data import format_float

# Matches tokens like @MagicDamage.values@ or @AttackSpeed@
AT_TOKEN_RE: Final = re.compile(r"@([A-Za-z0-9_*]+(?:\.[A-Za-z0-9_*]+)?)@")
# Matches tokens like {MagicDamage} or {AttackSpeed*100}
BRACE_TOKEN_RE: Final = re.compile(r"\{([A-Za-z0-9_.*]+)\}")
# Matches parentheses containing at least one @token@
PAREN_TOKEN_RE: Final = re.compile(r"\(\s*([^()]*@[^@()]+@[^()]*)\s*\)")

SCALING_GROUP_TEMPLATE: Final[str] = (
    '<span class="ability-scaling-group">'
    '<span class="ability-scaling-paren">(</span>'
    "{inner}"
    '<span class="ability-scaling-paren">)</span>'
    "</span>"
)
SCALING_PLUS: Final[str] = '<span class="ability-scaling-plus">+</span>'

SCALING_ICON_CLASSES: Final[dict[str, str]] = {
    "AP": "ability-token ability-icon ability-icon-ap",
    "AD": "ability-token ability-icon ability-icon-ad",
    "AS": "ability-token ability-icon ability-icon-as",
    "ARMOR": "ability-token ability-icon ability-icon-armor",
    "MR": "ability-token ability-icon ability-icon-mr",
    "CC": "ability-token ability-icon ability-icon-crit-chance",
    "CD": "ability-token ability-icon ability-icon-crit-damage",
    "HP": "ability-token ability-icon ability-icon-health",
    "MANA": "ability-token ability-icon ability-icon-mana",
    "RANGE": "ability-token ability-icon ability-icon-range",
    "SOULS": "ability-token ability-icon ability-icon-souls",
}


def join_display_values(values: list[str]) -> str:
    """Join non-blank display values with "/" (e.g. 50%/75%/100%)."""
    return "/".join(v.strip() for v in values if v.strip())


def join_ability_values(values: list[float]) -> str:
    """Join numeric values with "/" using the shortest decimal form."""
    return "/".join(format_float(v) for v in values)


def _display_content(v: AbilityVariable) -> str:
    return join_display_values(v.display_values)


def _numeric_content(v: AbilityVariable) -> str:
    return join_ability_values(v.values)


def _type_content(v: AbilityVariable) -> str:
    return v.type


def _name_content(v: AbilityVariable) -> str:
    return v.name


def _values_content(v: AbilityVariable) -> str:
    return _display_content(v) or _numeric_content(v)


def _scaling_content(v: AbilityVariable) -> str:
    if v.scalings:
        return " + ".join(v.scalings)
    return v.scaling


ContentStrategy = Callable[[AbilityVariable], str]

FIELD_STRATEGIES: Final[dict[str, ContentStrategy]] = {
    "": _values_content,
    "values": _values_content,
    "scaling": _scaling_content,
    "type": _type_content,
}

# Tried in order when the requested field is unknown or yields nothing.
CONTENT_FALLBACK_CHAIN: Final[tuple[ContentStrategy, ...]] = (
    _display_content,
    _numeric_content,
    _type_content,
    _name_content,
)


def select_ability_content(variable: AbilityVariable, field: str) -> str:
    """Pick the text a token should show for ``field``.

    Falls back through :data:`CONTENT_FALLBACK_CHAIN` and finally to the
    field name itself, so a resolved token never renders blank.
    """
    strategy = FIELD_STRATEGIES.get(field)
    if strategy is not None:
        content = strategy(variable)
        if content:
            return content

    for fallback in CONTENT_FALLBACK_CHAIN:
        content = fallback(variable)
        if content:
            return content

    return field


def normalize_scaling_key(raw: str) -> str:
    """Uppercase letters and digits only ("Armor " -> "ARMOR")."""
    return "".join(ch.upper() for ch in raw if ch.isalnum())


def scaling_icon_class(raw: str) -> str:
    key = normalize_scaling_key(raw)
    if not key:
        return ""
    return SCALING_ICON_CLASSES.get(key, "")


def scaling_parts(variable: AbilityVariable) -> list[str]:
    if variable.scalings:
        return list(variable.scalings)
    if variable.scaling.strip():
        return [variable.scaling]
    return []


def render_scaling_icons(variable: AbilityVariable) -> str:
    """Render scaling tags as icon spans joined by "+" separators.

    Unknown tags render as plain token spans. Returns an empty string when
    the variable has no scaling at all.
    """
    rendered = []
    for part in scaling_parts(variable):
        part = part.strip()
        if not part:
            continue
        if rendered:
            rendered.append(SCALING_PLUS)

        label = escape(part)
        icon_class = scaling_icon_class(part)
        if icon_class:
            # Text stays for screen readers; CSS shows the icon instead.
            rendered.append(
                f'<span class="ability-scaling-block">'
                f'<span class="{icon_class}" aria-label="{label}">'
                f'<span class="ability-icon-text">{label}</span>'
                f"</span></span>"
            )
        else:
            rendered.append(f'<span class="ability-token">{label}</span>')

    return "".join(rendered)


def render_ability_value(variable: AbilityVariable, field: str) -> str:
    """Render one resolved token as markup."""
    content = select_ability_content(variable, field)
    if not content:
        return ""

    if field == "scaling":
        icons = render_scaling_icons(variable)
        if icons:
            return icons

    classes = ["ability-token"]
    css = variable.css_class.strip()
    if css:
        classes.append(css)

    return f'<span class="{escape(" ".join(classes))}">{escape(content)}</span>'


def split_token(token: str) -> tuple[str, str]:
    """Split "Name.field" into ("Name", "field")."""
    name, _, field = token.partition(".")
    return name, field


def replace_ability_tokens(
    text: str,
    variables: Mapping[str, AbilityVariable],
    pattern: re.Pattern,
) -> str:
    """Replace every ``pattern`` token whose variable is known."""
    if not variables:
        return text

    def _render(match: re.Match) -> str:
        name, field = split_token(match.group(1))
        variable = variables.get(name)
        if variable is None:
            return match.group(0)
        return render_ability_value(variable, field) or match.group(0)

    return pattern.sub(_render, text)


def replace_parenthesized_tokens(text: str, variables: Mapping[str, AbilityVariable]) -> str:
    """Wrap "( ... @token@ ... )" groups whose tokens resolve."""
    if not variables:
        return text

    def _wrap(match: re.Match) -> str:
        inner = match.group(1).strip()
        rendered = replace_ability_tokens(inner, variables, AT_TOKEN_RE)
        rendered = replace_ability_tokens(rendered, variables, BRACE_TOKEN_RE)
        if not rendered or rendered == inner:
            return match.group(0)
        return SCALING_GROUP_TEMPLATE.format(inner=rendered)

    return PAREN_TOKEN_RE.sub(_wrap, text)


def format_ability_description(ability: Ability) -> Markup:
    """Render the ability description as safe HTML.

    Args:
        ability: The normalized ability.

    Returns:
        Markup ready to embed verbatim in a template; empty when the ability
        has no description text.
    """
    desc = ability.description.strip() or ability.description_raw.strip()
    if not desc:
        return Markup("")

    # Escape source text before injecting our own spans.
    text = str(escape(desc))
    text = replace_parenthesized_tokens(text, ability.variables)
    text = replace_ability_tokens(text, ability.variables, AT_TOKEN_RE)
    text = replace_ability_tokens(text, ability.variables, BRACE_TOKEN_RE)
    text = text.replace("\n", "<br />")

    return Markup(text.strip())
