"""Test doubles for the display sink, keyboard source and clock."""


class RecordingDisplay:
    """Display sink that remembers every write and flush."""

    def __init__(self):
        self.writes = []
        self.flushes = 0

    def write(self, x, y, char):
        self.writes.append((x, y, char))

    def flush(self):
        self.flushes += 1

    def reset(self):
        self.writes = []


class ScriptedKeyboard:
    """
    Keyboard source fed per tick.

    ``queue(*keys)`` makes keys pending; ``poll`` hands them out one by
    one and returns None once drained.
    """

    def __init__(self):
        self.pending = []
        self.polls = 0

    def queue(self, *keys):
        self.pending.extend(keys)

    def poll(self):
        self.polls += 1
        if self.pending:
            return self.pending.pop(0)
        return None


class FakeClock:
    """Manual clock; ``sleep`` advances it and records the request."""

    def __init__(self, step=0.0):
        self.now = 0.0
        self.step = step
        self.sleeps = []

    def __call__(self):
        value = self.now
        self.now += self.step
        return value

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeKeystroke(str):
    """Minimal stand-in for blessed's Keystroke."""

    def __new__(cls, text='', name=None):
        obj = super().__new__(cls, text)
        obj.name = name
        obj.is_sequence = name is not None
        return obj


def make_game(config=None, seed=1234, **kwargs):
    from plane_war.main import GameState

    display = RecordingDisplay()
    keyboard = ScriptedKeyboard()
    clock = FakeClock()
    game = GameState(display, keyboard, config, rng=seed,
                     clock=clock, sleep=clock.sleep, **kwargs)
    return game, display, keyboard
