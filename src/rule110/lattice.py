"""One-dimensional lattice state for the rule-110 cellular automaton.

The lattice is a fixed-length numpy array of 0/1 cells. Index 0 and the last
index are boundary cells: the engine never rewrites them, so they act as
fixed edges for the interior scan.
"""

import numpy as np
from typing import Iterator, List, Optional
import logging

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 100
MIN_SIZE = 3  # need at least one interior cell

ALIVE_CHAR = '#'
DEAD_CHAR = '.'


class Lattice:
    """Fixed-length binary cell buffer.

    Attributes:
        size: Number of cells (constant for the lifetime of the lattice)
        cells: 1D numpy uint8 array (1=alive, 0=dead)
    """

    def __init__(self, size: int = DEFAULT_SIZE, initial_state: Optional[np.ndarray] = None):
        """Initialize lattice with the given length.

        Args:
            size: Number of cells
            initial_state: Optional initial cell values (0/1), copied

        Raises:
            ConfigurationError: If size < 3 or initial_state doesn't fit
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ConfigurationError(f"Lattice size must be an integer, got {size!r}")
        if size < MIN_SIZE:
            raise ConfigurationError(
                f"Lattice size must be at least {MIN_SIZE} to have an interior cell, got {size}"
            )

        self.size = int(size)

        if initial_state is not None:
            initial_state = np.asarray(initial_state)
            if initial_state.shape != (self.size,):
                raise ConfigurationError(
                    f"Initial state shape {initial_state.shape} doesn't match lattice size {self.size}"
                )
            if not np.isin(initial_state, (0, 1)).all():
                raise ConfigurationError("Initial state must contain only 0 and 1")
            self.cells = initial_state.astype(np.uint8)
        else:
            self.cells = np.zeros(self.size, dtype=np.uint8)

        logger.debug(f"Created lattice with {self.size} cells")

    @classmethod
    def seeded(cls, size: int = DEFAULT_SIZE) -> 'Lattice':
        """Create a lattice in the generation-0 configuration.

        All cells are dead except the right boundary cell.
        """
        lattice = cls(size)
        lattice.reset()
        return lattice

    def reset(self) -> None:
        """Restore the generation-0 seed configuration in place."""
        self.cells.fill(0)
        self.cells[-1] = 1

    def copy(self) -> 'Lattice':
        """Create a deep copy of the lattice."""
        return Lattice(self.size, self.cells)

    def get(self, index: int) -> int:
        """Get cell state at index.

        Raises:
            IndexError: If index is out of bounds
        """
        if not 0 <= index < self.size:
            raise IndexError(f"Index {index} out of bounds for lattice of {self.size} cells")
        return int(self.cells[index])

    def set(self, index: int, value: int) -> None:
        """Set cell state at index.

        Raises:
            IndexError: If index is out of bounds
            ValueError: If value is not 0 or 1
        """
        if not 0 <= index < self.size:
            raise IndexError(f"Index {index} out of bounds for lattice of {self.size} cells")
        if value not in (0, 1):
            raise ValueError(f"Cell value must be 0 or 1, got {value!r}")
        self.cells[index] = value

    def count_alive(self) -> int:
        """Count cells in state 1."""
        return int(np.sum(self.cells))

    def density(self) -> float:
        """Fraction of cells that are alive."""
        return self.count_alive() / self.size

    def to_array(self) -> np.ndarray:
        """Get cells as a numpy array copy."""
        return self.cells.copy()

    def to_list(self) -> List[int]:
        """Get cells as a list of ints."""
        return [int(v) for v in self.cells]

    def render(self, alive_char: str = ALIVE_CHAR, dead_char: str = DEAD_CHAR) -> str:
        """Render the lattice as a single line of text."""
        return ''.join(alive_char if v else dead_char for v in self.cells)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_list())

    def __getitem__(self, index: int) -> int:
        """Access cell state using lattice[i] syntax."""
        return self.get(index)

    def __setitem__(self, index: int, value: int) -> None:
        """Set cell state using lattice[i] = value syntax."""
        self.set(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lattice):
            return False
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"Lattice(size={self.size}, alive={self.count_alive()}, density={self.density() * 100:.1f}%)"
