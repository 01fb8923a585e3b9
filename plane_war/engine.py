"""
Rendering Engine
=================
Double-buffered character grid with diffed presentation.
"""

from typing import List, Protocol


class DisplaySink(Protocol):
    """Anything that can put one character at a cursor position."""

    def write(self, x: int, y: int, char: str) -> None:
        ...


class DoubleBuffer:
    """
    Fixed-size double-buffered character grid.

    Frames are built in the back buffer, then presented by comparing
    against the front buffer (the last presented frame) and writing
    only the cells that changed. No screen clears needed.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.front: List[List[str]] = self._blank()
        self.back: List[List[str]] = self._blank()

    def _blank(self) -> List[List[str]]:
        return [[' '] * self.width for _ in range(self.height)]

    def clear(self):
        """Reset the back buffer to blanks in-place."""
        for row in self.back:
            for x in range(self.width):
                row[x] = ' '

    def draw(self, x: int, y: int, char: str):
        """Put a character in the back buffer. Off-grid writes are dropped."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.back[y][x] = char

    def draw_string(self, x: int, y: int, text: str):
        """Put a string in the back buffer, clipped per cell."""
        for i, char in enumerate(text):
            self.draw(x + i, y, char)

    def cell(self, x: int, y: int) -> str:
        """Read back a cell of the frame being built."""
        return self.back[y][x]

    def present(self, sink: DisplaySink) -> int:
        """
        Send changed cells to the sink and remember the frame.

        Returns the number of cells written. Presenting a frame identical
        to the previous one writes nothing.
        """
        writes = 0
        for y in range(self.height):
            back_row = self.back[y]
            front_row = self.front[y]
            for x in range(self.width):
                if back_row[x] != front_row[x]:
                    sink.write(x, y, back_row[x])
                    writes += 1

        # Copy rather than swap so the back buffer still holds this frame
        for y in range(self.height):
            self.front[y][:] = self.back[y]

        return writes

    def rows(self) -> List[str]:
        """Back buffer as text lines (handy for debugging and tests)."""
        return [''.join(row) for row in self.back]
