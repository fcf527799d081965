"""Name normalization used to match records with asset file names."""


def trait_slug(name: str) -> str:
    """Normalize a trait name for lookups ("Black Rose" -> "black-rose")."""
    s = name.lower()
    s = s.replace(" ", "-")
    s = s.replace("'", "")
    s = s.replace(".", "")
    return s


def unit_slug(name: str) -> str:
    """Normalize a unit name for lookups ("Dr. Mundo" -> "drmundo")."""
    return "".join(ch for ch in name.lower() if "a" <= ch <= "z" or "0" <= ch <= "9")
