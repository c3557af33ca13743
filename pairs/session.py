"""Interactive session state machine driving the Pairs terminal UI.

The session owns every piece of mutable UI state (current screen, input mode,
popup, cursors, typed text and collected player names).  Presentation code
only reads it; :meth:`Session.handle_key` is the single mutation entry point
and is called once per input event.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Final

from .board import Board, generate_board
from .layout import MAX_PAIRS, MIN_PAIRS, validate_board_size

__all__ = [
    "Screen",
    "InputMode",
    "TitleButton",
    "TITLE_BUTTONS",
    "PopupSeverity",
    "PopupMessage",
    "KeyPress",
    "DEFAULT_BOARD_SIZE",
    "SessionConfig",
    "Session",
]

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE: Final[int] = 18


class Screen(str, Enum):
    TITLE = "title"
    PLAYER_COUNT_INPUT = "player_count_input"
    PLAYER_NAME_INPUT = "player_name_input"
    GAMEPLAY = "gameplay"
    OPTIONS = "options"


class InputMode(str, Enum):
    NORMAL = "normal"
    TEXT_ENTRY = "text_entry"


class TitleButton(str, Enum):
    START = "Start"
    OPTIONS = "Options"
    EXIT = "Exit"


TITLE_BUTTONS: Final[tuple[TitleButton, ...]] = tuple(TitleButton)


class PopupSeverity(str, Enum):
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class PopupMessage:
    """Severity-tagged message that lives until the next input event."""

    text: str
    severity: PopupSeverity = PopupSeverity.INFO

    @classmethod
    def info(cls, text: str) -> "PopupMessage":
        return cls(text, PopupSeverity.INFO)

    @classmethod
    def warn(cls, text: str) -> "PopupMessage":
        return cls(text, PopupSeverity.WARN)

    @classmethod
    def error(cls, text: str) -> "PopupMessage":
        return cls(text, PopupSeverity.ERROR)


@dataclass(frozen=True, slots=True)
class KeyPress:
    """Abstract key event.

    ``key`` uses Textual key names (``"up"``, ``"enter"``, ``"backspace"``,
    ``"escape"``, ``"a"`` ...); ``character`` carries the printable text, if any.
    """

    key: str
    character: str | None = None

    @classmethod
    def char(cls, character: str) -> "KeyPress":
        return cls(key=character, character=character)

    @property
    def is_printable(self) -> bool:
        return self.character is not None and len(self.character) == 1 and self.character.isprintable()


@dataclass(slots=True)
class SessionConfig:
    """Runtime configuration for a session."""

    board_size: int = DEFAULT_BOARD_SIZE
    seed: int | None = None

    def __post_init__(self) -> None:
        validate_board_size(self.board_size)


_UP_KEYS: Final[frozenset[str]] = frozenset({"up", "left"})
_DOWN_KEYS: Final[frozenset[str]] = frozenset({"down", "right"})


@dataclass(slots=True)
class Session:
    """Flat session state with a screen discriminant and an input-mode tag."""

    config: SessionConfig = field(default_factory=SessionConfig)
    screen: Screen = Screen.TITLE
    input_mode: InputMode = InputMode.NORMAL
    popup: PopupMessage | None = None
    cursor: int = 0
    cursor_mod: int = len(TITLE_BUTTONS)
    input_buffer: str = ""
    player_names: list[str] = field(default_factory=list)
    board: Board | None = None
    board_cursor: tuple[int, int] = (0, 0)
    running: bool = True
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.config.seed)

    @property
    def selected_button(self) -> TitleButton:
        return TITLE_BUTTONS[self.cursor]

    def handle_key(self, key: KeyPress) -> bool:
        """Apply ``key`` to the session; return ``False`` once it has ended."""

        if not self.running:
            return False
        if self.popup is not None:
            self.popup = None
        handlers: dict[Screen, Callable[[KeyPress], None]] = {
            Screen.TITLE: self._handle_title,
            Screen.PLAYER_COUNT_INPUT: self._handle_text_screen,
            Screen.PLAYER_NAME_INPUT: self._handle_text_screen,
            Screen.GAMEPLAY: self._handle_gameplay,
            Screen.OPTIONS: self._handle_options,
        }
        handlers[self.screen](key)
        return self.running

    def terminate(self) -> None:
        logger.debug("session terminated from %s", self.screen.value)
        self.running = False

    def _goto(self, screen: Screen) -> None:
        logger.debug("screen %s -> %s", self.screen.value, screen.value)
        self.screen = screen
        self.input_mode = InputMode.NORMAL

    def _move_cursor(self, step: int) -> None:
        self.cursor = (self.cursor + step) % self.cursor_mod

    def _handle_title(self, key: KeyPress) -> None:
        self.cursor_mod = len(TITLE_BUTTONS)
        if key.key in _UP_KEYS:
            self._move_cursor(-1)
        elif key.key in _DOWN_KEYS:
            self._move_cursor(1)
        elif key.key == "enter":
            button = self.selected_button
            if button is TitleButton.START:
                self._goto(Screen.PLAYER_COUNT_INPUT)
            elif button is TitleButton.OPTIONS:
                self._goto(Screen.OPTIONS)
            else:
                self.terminate()

    def _handle_text_screen(self, key: KeyPress) -> None:
        if self.input_mode is InputMode.NORMAL:
            if key.key == "q":
                self.terminate()
            elif key.key == "e":
                self.input_mode = InputMode.TEXT_ENTRY
            elif key.key == "n":
                self._advance()
            return

        if key.key == "enter":
            self.submit_name()
        elif key.key == "backspace":
            self.input_buffer = self.input_buffer[:-1]
        elif key.key == "escape":
            self.input_mode = InputMode.NORMAL
        elif key.is_printable:
            self.input_buffer += key.character or ""

    def submit_name(self) -> bool:
        """Validate the input buffer and add it to the player list.

        Rejections raise a warning popup and leave the buffer for re-entry.
        """

        name = self.input_buffer.strip()
        self.input_buffer = name
        if not name:
            self.popup = PopupMessage.warn("Name is required.")
            return False
        if name in self.player_names:
            logger.info("rejected duplicate player name %r", name)
            self.popup = PopupMessage.warn(f'Name "{name}" already exists.')
            return False
        self.player_names.append(name)
        self.input_buffer = ""
        logger.info("added player %r", name)
        return True

    def _advance(self) -> None:
        if self.screen is Screen.PLAYER_COUNT_INPUT:
            self._goto(Screen.PLAYER_NAME_INPUT)
        elif not self.player_names:
            self.popup = PopupMessage.info("Add at least one player first.")
        else:
            self.start_game()

    def start_game(self) -> Board:
        """Deal a fresh board and switch to the gameplay screen."""

        self.board = generate_board(self.config.board_size, self.rng)
        self.board_cursor = (0, 0)
        self._goto(Screen.GAMEPLAY)
        return self.board

    def _handle_gameplay(self, key: KeyPress) -> None:
        if key.key == "q":
            self.terminate()
            return
        if self.board is None:
            return
        row, col = self.board_cursor
        if key.key == "up":
            row -= 1
        elif key.key == "down":
            row += 1
        elif key.key == "left":
            col -= 1
        elif key.key == "right":
            col += 1
        elif key.key in ("enter", "space"):
            self.board.flip(row, col)
            return
        row = min(max(row, 0), self.board.rows - 1)
        col = min(max(col, 0), len(self.board.grid[row]) - 1)
        self.board_cursor = (row, col)

    def _handle_options(self, key: KeyPress) -> None:
        if key.key in ("escape", "enter"):
            self._goto(Screen.TITLE)
        elif key.key in ("left", "down"):
            self.config.board_size = max(MIN_PAIRS, self.config.board_size - 1)
        elif key.key in ("right", "up"):
            self.config.board_size = min(MAX_PAIRS, self.config.board_size + 1)
