"""Common code for the valueset package."""

######################################################################
### Public names.

__all__ = [
    "ValueSetError",
    ]

######################################################################
### Exceptions.

class ValueSetError(Exception):
    """Base class for valueset exceptions."""
    pass
