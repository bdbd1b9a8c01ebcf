"""chrklst curses-based presentation loop."""

import curses
import logging
import unicodedata
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .core import AppState

logger = logging.getLogger(__name__)

TITLE = " Checklist "
PADDING = 3

QUIT_KEYS = (ord("q"),)
NEXT_KEYS = (ord(" "), 10, 13, curses.KEY_ENTER)
# getch() results that are not key presses
IGNORED_EVENTS = (-1, curses.KEY_RESIZE, curses.KEY_MOUSE)


def char_width(ch: str) -> int:
    """Terminal cells taken by one character."""
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def cell_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


def clip_cells(text: str, width: int) -> str:
    """Longest prefix of text that fits in width cells."""
    used = 0
    for i, ch in enumerate(text):
        used += char_width(ch)
        if used > width:
            return text[:i]
    return text


def wrap_cells(text: str, width: int) -> List[str]:
    """Greedy word wrap by display width; words wider than a line are split."""
    lines: List[str] = []
    line, used = "", 0
    for word in text.split():
        while cell_width(word) > width:
            if line:
                lines.append(line)
                line, used = "", 0
            head = clip_cells(word, width)
            if head:
                lines.append(head)
            # a character wider than the whole line cannot be drawn
            word = word[len(head) or 1 :]
        if not word:
            continue
        w = cell_width(word)
        if not line:
            line, used = word, w
        elif used + 1 + w <= width:
            line, used = f"{line} {word}", used + 1 + w
        else:
            lines.append(line)
            line, used = word, w
    if line:
        lines.append(line)
    return lines


def printable(text: str) -> str:
    """Replace NUL, which curses refuses to draw."""
    return text.replace("\x00", "\ufffd")


PAIR_DONE = 1
PAIR_KEY = 2


@dataclass
class Styles:
    """curses attributes used by the panel."""

    title: int
    key: int
    text: int
    done: int

    @classmethod
    def plain(cls) -> "Styles":
        """Attribute-only styles; usable before initscr()."""
        return cls(
            title=curses.A_BOLD,
            key=curses.A_BOLD,
            text=curses.A_NORMAL,
            done=curses.A_BOLD | curses.A_STANDOUT,
        )


def init_styles() -> Styles:
    """Set up color pairs when the terminal has colors."""
    styles = Styles.plain()
    if not curses.has_colors():
        return styles
    curses.start_color()
    bg = -1
    try:
        curses.use_default_colors()
    except curses.error:
        bg = curses.COLOR_BLACK
    curses.init_pair(PAIR_DONE, curses.COLOR_GREEN, bg)
    curses.init_pair(PAIR_KEY, curses.COLOR_BLUE, bg)
    styles.done = curses.color_pair(PAIR_DONE)
    styles.key = curses.color_pair(PAIR_KEY) | curses.A_BOLD
    return styles


class ChecklistApp:
    """Draws the current step in a bordered panel and reacts to keys.

    stdscr is anything with the curses window methods used here (getmaxyx,
    erase, border, addnstr, refresh, getch).
    """

    def __init__(self, stdscr, state: AppState, styles: Optional[Styles] = None):
        self.stdscr = stdscr
        self.state = state
        self.styles = styles or Styles.plain()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        while not self.state.exit:
            self.draw()
            self.handle_events()

    def legend(self) -> List[Tuple[str, int]]:
        return [
            (" Next ", self.styles.text),
            ("<Space/Enter>", self.styles.key),
            (" Quit ", self.styles.text),
            ("<Q> ", self.styles.key),
        ]

    def put(self, y: int, x: int, text: str, attr: int) -> int:
        """Write text at (y, x) clipped before the right border; return the next x."""
        _, width = self.stdscr.getmaxyx()
        room = width - 1 - x
        clipped = clip_cells(text, room) if x >= 0 else ""
        if clipped:
            self.stdscr.addnstr(y, x, clipped, len(clipped), attr)
        return x + cell_width(text)

    def draw(self) -> None:
        """Render border, title, legend and the current message."""
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        if height < 2 or width < 2:
            self.stdscr.refresh()
            return

        self.stdscr.border()
        self.put(0, max(1, (width - cell_width(TITLE)) // 2), TITLE, self.styles.title)

        segments = self.legend()
        total = sum(cell_width(s) for s, _ in segments)
        x = max(1, (width - total) // 2)
        for text, attr in segments:
            x = self.put(height - 1, x, text, attr)

        self.draw_message(height, width)
        self.stdscr.refresh()

    def draw_message(self, height: int, width: int) -> None:
        top = left = 1 + PADDING
        inner_w = width - 2 * (1 + PADDING)
        inner_h = height - 2 * (1 + PADDING)
        if inner_w < 1 or inner_h < 1:
            return

        msg = self.state.message()
        attr = self.styles.done if msg.done else self.styles.text
        lines = wrap_cells(printable(msg.text), inner_w)
        for i, line in enumerate(lines[:inner_h]):
            x = left + (inner_w - cell_width(line)) // 2
            self.stdscr.addnstr(top + i, x, line, len(line), attr)

    def handle_events(self) -> None:
        """Block for the next input event and apply it."""
        ch = self.stdscr.getch()
        if ch in IGNORED_EVENTS:
            return
        self.handle_key(ch)

    def handle_key(self, ch: int) -> None:
        if ch in QUIT_KEYS:
            self.state.quit()
        elif ch in NEXT_KEYS:
            self.state.next_step()


def present(steps: Iterable[object]) -> None:
    """Run the interactive presenter over steps until the user quits.

    Input is read in raw mode. curses.wrapper restores the terminal on
    every exit path, so errors raised inside the loop reach the caller with
    the screen already back to normal.
    """
    state = AppState.with_steps(steps)

    def _main(stdscr):
        # raw mode: Ctrl-C and Ctrl-Z arrive as ordinary keys
        curses.raw()
        curses.curs_set(0)
        stdscr.keypad(True)
        ChecklistApp(stdscr, state, init_styles()).run()

    curses.wrapper(_main)
    logger.debug("Presenter exited with %d steps left", len(state.steps))
