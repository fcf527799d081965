# Route modules
from . import builder, units

__all__ = ["builder", "units"]
