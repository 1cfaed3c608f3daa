"""
Elementary Cellular Automaton Rules

Neighborhood encoding and transition tables for one-dimensional, two-state,
radius-1 automata. Rule 110 is the default; other Wolfram codes are
available through RuleParams.
"""

from typing import Dict, Tuple

import numpy as np

from .errors import ConfigurationError


RULE_110 = 110
NEIGHBORHOOD_COUNT = 8

# (left, center, right) -> new center
RULE_110_TABLE: Dict[Tuple[int, int, int], int] = {
    (1, 1, 1): 0,
    (1, 1, 0): 1,
    (1, 0, 1): 1,
    (1, 0, 0): 0,
    (0, 1, 1): 1,
    (0, 1, 0): 1,
    (0, 0, 1): 1,
    (0, 0, 0): 0,
}


def encode_neighborhood(left: int, center: int, right: int) -> int:
    """Pack a 3-cell neighborhood into its code (0-7).

    Args:
        left: Left neighbor state (0 or 1)
        center: Cell state (0 or 1)
        right: Right neighbor state (0 or 1)

    Returns:
        left*4 + center*2 + right
    """
    return (left << 2) | (center << 1) | right


def decode_neighborhood(code: int) -> Tuple[int, int, int]:
    """Unpack a neighborhood code into (left, center, right)."""
    if not 0 <= code < NEIGHBORHOOD_COUNT:
        raise ValueError(f"Neighborhood code must be in 0..7, got {code}")
    return ((code >> 2) & 1, (code >> 1) & 1, code & 1)


def apply_rule(left: int, center: int, right: int) -> int:
    """Apply rule 110 to a single neighborhood."""
    return RULE_110_TABLE[(left, center, right)]


class RuleParams:
    """Transition table for an elementary automaton, keyed by Wolfram code.

    Bit k of the rule number is the new center value for the neighborhood
    whose code is k, so rule 110 (0b01101110) reproduces RULE_110_TABLE.
    """

    def __init__(self, number: int = RULE_110):
        """Initialize rule parameters.

        Args:
            number: Wolfram rule number (0-255)

        Raises:
            ConfigurationError: If number is not an integer in 0..255
        """
        if isinstance(number, bool) or not isinstance(number, (int, np.integer)):
            raise ConfigurationError(f"Rule number must be an integer, got {number!r}")
        if not 0 <= number <= 255:
            raise ConfigurationError(f"Rule number must be in 0..255, got {number}")

        self.number = int(number)
        self.lookup = np.array(
            [(self.number >> code) & 1 for code in range(NEIGHBORHOOD_COUNT)],
            dtype=np.uint8,
        )

    @classmethod
    def rule110(cls) -> 'RuleParams':
        """Create the standard rule 110 parameters."""
        return cls(RULE_110)

    def update_cell(self, left: int, center: int, right: int) -> int:
        """New center value for one neighborhood."""
        return int(self.lookup[encode_neighborhood(left, center, right)])

    def as_table(self) -> Dict[Tuple[int, int, int], int]:
        """Full 8-entry table, highest neighborhood code first."""
        return {
            decode_neighborhood(code): int(self.lookup[code])
            for code in reversed(range(NEIGHBORHOOD_COUNT))
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleParams):
            return False
        return self.number == other.number

    def __repr__(self) -> str:
        return f"RuleParams(number={self.number})"
