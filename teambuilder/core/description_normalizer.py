"""Cleanup of legacy tooltip text into the {Placeholder} format."""

import re
from typing import Final

_TRACKER_LABEL_RE: Final = re.compile(r"<TFTTrackerLabel>.*?</TFTTrackerLabel>", re.DOTALL)
_UNIT_PROPERTY_RE: Final = re.compile(r"@TFTUnitProperty\.[^@]+@")
_TAG_RE: Final = re.compile(r"</?[^>]+?>")
_ICON_SCALE_RE: Final = re.compile(r"%i:[^%]+%")
_KEYWORD_NUMBERED_RE: Final = re.compile(r"\bkeyword\s*\d*\b", re.IGNORECASE)
_KEYWORD_RE: Final = re.compile(r"\bkeyword\b", re.IGNORECASE)
_DOUBLE_BRACES_RE: Final = re.compile(r"\{\{[^{}]+\}\}")
# @Damage@ / @Damage*100@
_LEGACY_VAR_RE: Final = re.compile(r"@([A-Za-z0-9_]+(?:\*100)?)@")
_WHITESPACE_RE: Final = re.compile(r"\s+")


def normalize_description(desc: str) -> str:
    """Clean a sourced tooltip into our placeholder format.

    Steps run in order, each on the previous output:

    1. ``&nbsp;`` becomes a plain space.
    2. ``<TFTTrackerLabel>`` blocks are dropped with their contents.
    3. ``@TFTUnitProperty.*@`` tokens are dropped.
    4. Remaining tags are stripped.
    5. Escaping artifacts (``\\"`` and ``">``) are removed.
    6. ``%i:...%`` icon tokens are removed.
    7. ``keyword`` markers (optionally numbered) are removed.
    8. ``{{...}}`` tokens are removed.
    9. ``@Name@`` / ``@Name*100@`` become ``{Name}`` / ``{Name*100}``.
    10. Empty parentheticals `` ()`` are removed.
    11. Whitespace is collapsed and trimmed.

    Args:
        desc: Raw description text.

    Returns:
        The cleaned text, or an empty string when nothing is left.
    """
    s = desc.replace("&nbsp;", " ")

    s = _TRACKER_LABEL_RE.sub("", s)
    s = _UNIT_PROPERTY_RE.sub("", s)
    s = _TAG_RE.sub("", s)

    s = s.replace('\\"', "")
    s = s.replace('">', "")

    s = _ICON_SCALE_RE.sub("", s)

    s = _KEYWORD_NUMBERED_RE.sub("", s)
    s = _KEYWORD_RE.sub("", s)

    s = _DOUBLE_BRACES_RE.sub("", s)

    # *100 is kept verbatim; the formatter treats it as part of the name.
    s = _LEGACY_VAR_RE.sub(r"{\1}", s)

    s = s.replace(" ()", "")
    return _WHITESPACE_RE.sub(" ", s).strip()
