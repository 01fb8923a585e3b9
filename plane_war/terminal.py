"""
Terminal Glue
==============
blessed-backed display sink and non-blocking keyboard source.
"""

import logging
from contextlib import contextmanager
from typing import List, Optional

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")


logger = logging.getLogger(__name__)


class TerminalTooSmall(RuntimeError):
    """The terminal cannot fit the game grid."""

    def __init__(self, width: int, height: int, min_width: int, min_height: int):
        super().__init__(
            f'Terminal too small: {width}x{height}. '
            f'Minimum: {min_width}x{min_height}'
        )
        self.width = width
        self.height = height


class TerminalDisplay:
    """
    Cursor-addressed character sink.

    ``write`` queues a positioned character; ``flush`` emits everything
    queued since the last flush in one print.
    """

    def __init__(self, term: Terminal, width: int, height: int, title: str = ''):
        self.term = term
        self.width = width
        self.height = height
        self.title = title
        self._pending: List[str] = []

    def configure(self):
        """One-time window setup: size request and title."""
        parts = [f'\x1b[8;{self.height};{self.width}t']
        if self.title:
            parts.append(f'\x1b]0;{self.title}\x07')
        print(''.join(parts), end='', flush=True)
        logger.info('Configured display %dx%d', self.width, self.height)

    def check_size(self):
        if self.term.width < self.width or self.term.height < self.height:
            raise TerminalTooSmall(
                self.term.width, self.term.height, self.width, self.height
            )

    @contextmanager
    def session(self):
        """Fullscreen, cbreak input and hidden cursor for the game's lifetime."""
        term = self.term
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            # Initial clear (only time we clear the whole screen)
            print(term.home + term.clear, end='', flush=True)
            try:
                yield self
            finally:
                print(term.normal, end='', flush=True)

    def write(self, x: int, y: int, char: str) -> None:
        self._pending.append(self.term.move_xy(x, y) + char)

    def flush(self):
        if self._pending:
            print(''.join(self._pending), end='', flush=True)
            self._pending = []


class KeyboardSource:
    """Non-blocking key reader over ``Terminal.inkey``."""

    def __init__(self, term: Terminal):
        self.term = term

    def poll(self) -> Optional[str]:
        """Next pending keystroke, or None if nothing is waiting."""
        key = self.term.inkey(timeout=0)
        return key if key else None

    def wait(self, timeout: float) -> Optional[str]:
        """Block until a key arrives or ``timeout`` seconds pass."""
        key = self.term.inkey(timeout=timeout)
        return key if key else None
