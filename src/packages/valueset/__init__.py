"""An unordered set of unique values with set algebra and functional
combinators."""

__all__ = ["Set", "ValueSetError", "new"]

from valueset.common import ValueSetError
from valueset.valueset import Set, new
