"""
Host Observers

The engine reports each generation through two callbacks: one per cell, in
increasing index order, and one "frame complete" notification after the
last cell. Observers here implement that seam for the hosts we ship:
plain callbacks, an in-memory recorder and a text renderer.
"""

import sys
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, TextIO, Tuple

from .lattice import ALIVE_CHAR, DEAD_CHAR


class HostObserver(ABC):
    """Receiver for per-generation lattice reports."""

    @abstractmethod
    def report_cell(self, index: int, value: int) -> None:
        """Receive the value of one cell."""

    @abstractmethod
    def report_frame_complete(self) -> None:
        """All cells of the current generation have been reported."""


class NullObserver(HostObserver):
    """Observer that discards every report."""

    def report_cell(self, index: int, value: int) -> None:
        pass

    def report_frame_complete(self) -> None:
        pass


class CallbackObserver(HostObserver):
    """Adapts a pair of plain callables to the observer interface."""

    def __init__(self,
                 report_cell: Callable[[int, int], None],
                 report_frame_complete: Callable[[], None]):
        self._report_cell = report_cell
        self._report_frame_complete = report_frame_complete

    def report_cell(self, index: int, value: int) -> None:
        self._report_cell(index, value)

    def report_frame_complete(self) -> None:
        self._report_frame_complete()


class RecordingObserver(HostObserver):
    """Records every report for later inspection.

    Attributes:
        events: Ordered log of ("cell", index, value) and ("frame",) tuples
        frames: Completed generations, each a list of cell values
    """

    def __init__(self):
        self.events: List[Tuple] = []
        self.frames: List[List[int]] = []
        self._pending: List[int] = []

    def report_cell(self, index: int, value: int) -> None:
        self.events.append(("cell", index, value))
        self._pending.append(value)

    def report_frame_complete(self) -> None:
        self.events.append(("frame",))
        self.frames.append(self._pending)
        self._pending = []

    @property
    def frame_count(self) -> int:
        """Number of completed frames."""
        return len(self.frames)

    def cell_reports(self) -> List[Tuple[int, int]]:
        """All (index, value) pairs in report order."""
        return [(event[1], event[2]) for event in self.events if event[0] == "cell"]


class TextFrameRenderer(HostObserver):
    """Buffers cell reports and writes one text line per frame.

    Args:
        stream: Output stream (stdout if None)
        alive_char: Character for cells in state 1
        dead_char: Character for cells in state 0
    """

    def __init__(self,
                 stream: Optional[TextIO] = None,
                 alive_char: str = ALIVE_CHAR,
                 dead_char: str = DEAD_CHAR):
        self.stream = stream if stream is not None else sys.stdout
        self.alive_char = alive_char
        self.dead_char = dead_char
        self.frames_written = 0
        self._row: List[str] = []

    def report_cell(self, index: int, value: int) -> None:
        if index != len(self._row):
            raise ValueError(f"Cell {index} reported out of order (expected {len(self._row)})")
        self._row.append(self.alive_char if value else self.dead_char)

    def report_frame_complete(self) -> None:
        self.stream.write(''.join(self._row) + '\n')
        self.stream.flush()
        self.frames_written += 1
        self._row = []
