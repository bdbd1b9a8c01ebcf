# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


class FakeWindow:
    """Stands in for a curses window: records writes, replays scripted keys."""

    def __init__(self, keys=(), height=24, width=80):
        self.keys = list(keys)
        self.height = height
        self.width = width
        self.writes = []
        self.draws = 0
        self.bordered = False

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.writes = []
        self.bordered = False

    def border(self):
        self.bordered = True

    def addnstr(self, y, x, text, n, attr=0):
        if "\x00" in text:
            raise ValueError("embedded null character")
        assert 0 <= y < self.height
        assert 0 <= x < self.width
        assert n > 0
        self.writes.append((y, x, text[:n], attr))

    def keypad(self, flag):
        self.keypad_enabled = flag

    def refresh(self):
        self.draws += 1

    def getch(self):
        if not self.keys:
            raise AssertionError("getch() called with no scripted keys left")
        return self.keys.pop(0)

    def text_at(self, y):
        return "".join(t for row, _, t, _ in sorted(self.writes) if row == y)

    def texts(self):
        return [t for _, _, t, _ in self.writes]


@pytest.fixture
def checklist_home(tmp_path, monkeypatch):
    home = tmp_path / "checklists"
    home.mkdir()
    monkeypatch.setenv("CHRKLST_DIR", str(home))
    return home


@pytest.fixture
def make_window():
    return FakeWindow
