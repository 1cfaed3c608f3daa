"""Rule 110 lattice engine.

Evolves a one-dimensional lattice under an elementary rule (rule 110 by
default) and reports every generation to a host observer. The lattice is
updated in place, left to right, keeping the pre-update value of the cell
just overwritten as the left input for the next one.
"""

import numpy as np
from typing import Dict, Optional, Tuple
import logging

from .errors import InvalidArgument
from .host import HostObserver, NullObserver
from .lattice import DEFAULT_SIZE, Lattice
from .rules import RuleParams

logger = logging.getLogger(__name__)


def _validate_cycles(max_cycles: int) -> None:
    if isinstance(max_cycles, bool) or not isinstance(max_cycles, (int, np.integer)):
        raise InvalidArgument(f"max_cycles must be an integer, got {max_cycles!r}")
    if max_cycles < 0:
        raise InvalidArgument(f"max_cycles must be >= 0, got {max_cycles}")


class Rule110Engine:
    """Drives a lattice through successive generations.

    Boundary cells (first and last index) are never rewritten; only the
    interior is scanned.
    """

    def __init__(self,
                 size: int = DEFAULT_SIZE,
                 observer: Optional[HostObserver] = None,
                 rule_params: Optional[RuleParams] = None,
                 log_interval: Optional[int] = None):
        """Initialize the engine and its lattice.

        Args:
            size: Lattice length (at least 3)
            observer: Host receiving cell and frame reports (discarded if None)
            rule_params: Transition rule (rule 110 if None)
            log_interval: If provided, log a debug summary every N generations

        Raises:
            ConfigurationError: If size is below 3
        """
        self.lattice = Lattice.seeded(size)
        self.observer = observer if observer is not None else NullObserver()
        self.rule_params = rule_params or RuleParams.rule110()
        self.log_interval = log_interval

        logger.debug(f"Created engine: {self.lattice.size} cells, rule {self.rule_params.number}")

    @property
    def size(self) -> int:
        return self.lattice.size

    def report(self) -> None:
        """Report the current lattice to the observer, then signal frame complete."""
        for index in range(self.lattice.size):
            self.observer.report_cell(index, int(self.lattice.cells[index]))
        self.observer.report_frame_complete()

    def step(self, lattice: Optional[Lattice] = None) -> int:
        """Advance one generation in place.

        Args:
            lattice: Lattice to update (the engine's own if None)

        Returns:
            Number of alive cells after the update
        """
        if lattice is None:
            lattice = self.lattice

        cells = lattice.cells
        lookup = self.rule_params.lookup

        # carry holds the pre-update value of cells[i - 1]
        carry = int(cells[0])
        for i in range(1, lattice.size - 1):
            center = int(cells[i])
            code = (carry << 2) | (center << 1) | int(cells[i + 1])
            carry = center
            cells[i] = lookup[code]

        return lattice.count_alive()

    def update_lattice(self, lattice: Lattice) -> Lattice:
        """Compute the next generation into a new lattice.

        Double-buffered counterpart of step(); the input is left untouched.

        Args:
            lattice: Current lattice state

        Returns:
            New lattice holding the next generation
        """
        cells = lattice.cells.astype(np.intp)
        codes = (cells[:-2] << 2) | (cells[1:-1] << 1) | cells[2:]

        new_lattice = lattice.copy()
        new_lattice.cells[1:-1] = self.rule_params.lookup[codes]
        return new_lattice

    def run(self, max_cycles: int) -> None:
        """Seed the lattice, report it, then evolve and report max_cycles generations.

        Args:
            max_cycles: Number of update steps after generation 0

        Raises:
            InvalidArgument: If max_cycles is negative or not an integer
        """
        _validate_cycles(max_cycles)

        logger.info(f"Running rule {self.rule_params.number} on {self.lattice.size} cells "
                    f"for {max_cycles} generations")

        self.lattice.reset()
        self.report()

        for cycle in range(1, max_cycles + 1):
            alive = self.step()
            self.report()

            if self.log_interval and cycle % self.log_interval == 0:
                logger.debug(f"Generation {cycle}: alive={alive}")

        logger.info(f"Run complete: {max_cycles + 1} frames, final alive={self.lattice.count_alive()}")

    def evolve(self, max_cycles: int) -> np.ndarray:
        """Run without reporting and return the space-time history.

        Args:
            max_cycles: Number of update steps after generation 0

        Returns:
            uint8 array of shape (max_cycles + 1, size); row g is generation g

        Raises:
            InvalidArgument: If max_cycles is negative or not an integer
        """
        _validate_cycles(max_cycles)

        history = np.empty((max_cycles + 1, self.lattice.size), dtype=np.uint8)

        self.lattice.reset()
        history[0] = self.lattice.cells
        for cycle in range(1, max_cycles + 1):
            self.step()
            history[cycle] = self.lattice.cells

        return history

    def get_rule_table(self) -> Dict[Tuple[int, int, int], int]:
        """Get the complete table for all 8 neighborhoods.

        Returns:
            Dictionary mapping (left, center, right) to the new center value
        """
        return self.rule_params.as_table()


def rule110(max_cycles: int,
            observer: Optional[HostObserver] = None,
            size: int = DEFAULT_SIZE) -> None:
    """Run rule 110 from the seed configuration, reporting to observer."""
    Rule110Engine(size=size, observer=observer).run(max_cycles)
