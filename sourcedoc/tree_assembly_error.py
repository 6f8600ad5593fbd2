"""Error raised when declaration records violate the tree invariants."""


class TreeAssemblyError(ValueError):
    """Malformed input or an attempt to relink a frozen node."""
