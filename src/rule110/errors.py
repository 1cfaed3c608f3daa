"""Error types raised by the rule-110 lattice engine."""


class ConfigurationError(ValueError):
    """Lattice or rule configuration cannot be used (e.g. fewer than 3 cells)."""


class InvalidArgument(ValueError):
    """Run argument is out of range, such as a negative cycle count."""
