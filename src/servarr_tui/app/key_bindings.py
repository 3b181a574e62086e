"""Keys, key bindings and the help text derived from them.

All keyboard input enters through ServarrTuiApp.on_key, is normalised to a
KeyPress here and handed to the block handlers. Textual BINDINGS are not used.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto


class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    BACKSPACE = auto()
    DELETE = auto()
    SUBMIT = auto()
    ESC = auto()
    TAB = auto()
    BACK_TAB = auto()
    CTRL_C = auto()
    CHAR = auto()


@dataclass(frozen=True)
class KeyPress:
    key: Key
    char: str = ""

    @classmethod
    def of(cls, char: str) -> KeyPress:
        return cls(Key.CHAR, char)

    @property
    def display(self) -> str:
        return self.char if self.key is Key.CHAR else _DISPLAY[self.key]


# [LAW:one-source-of-truth] Textual key name → Key. Printable characters not
# listed here arrive as Key.CHAR.
TEXTUAL_KEYS: dict[str, Key] = {
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "home": Key.HOME,
    "end": Key.END,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
    "backspace": Key.BACKSPACE,
    "delete": Key.DELETE,
    "enter": Key.SUBMIT,
    "escape": Key.ESC,
    "tab": Key.TAB,
    "shift+tab": Key.BACK_TAB,
    "ctrl+c": Key.CTRL_C,
}

_DISPLAY: dict[Key, str] = {
    Key.UP: "↑",
    Key.DOWN: "↓",
    Key.LEFT: "←",
    Key.RIGHT: "→",
    Key.HOME: "home",
    Key.END: "end",
    Key.PAGE_UP: "pgup",
    Key.PAGE_DOWN: "pgdown",
    Key.BACKSPACE: "backspace",
    Key.DELETE: "del",
    Key.SUBMIT: "enter",
    Key.ESC: "esc",
    Key.TAB: "tab",
    Key.BACK_TAB: "shift-tab",
    Key.CTRL_C: "ctrl-c",
}


def from_textual(key: str, character: str | None) -> KeyPress | None:
    """Translate a Textual key event. None for keys nothing listens to."""
    mapped = TEXTUAL_KEYS.get(key)
    if mapped is not None:
        return KeyPress(mapped)
    if character and character.isprintable():
        return KeyPress.of(character)
    return None


@dataclass(frozen=True)
class KeyBinding:
    key: KeyPress
    desc: str


@dataclass(frozen=True)
class KeyBindings:
    up: KeyBinding
    down: KeyBinding
    left: KeyBinding
    right: KeyBinding
    home: KeyBinding
    end: KeyBinding
    backspace: KeyBinding
    delete: KeyBinding
    submit: KeyBinding
    esc: KeyBinding
    next_server: KeyBinding
    previous_server: KeyBinding
    quit: KeyBinding
    add: KeyBinding
    edit: KeyBinding
    search: KeyBinding
    filter: KeyBinding
    refresh: KeyBinding
    update: KeyBinding
    clear: KeyBinding
    auto_search: KeyBinding
    test: KeyBinding
    test_all: KeyBinding
    logs: KeyBinding
    tasks: KeyBinding
    events: KeyBinding


DEFAULT_KEYBINDINGS = KeyBindings(
    up=KeyBinding(KeyPress(Key.UP), "up"),
    down=KeyBinding(KeyPress(Key.DOWN), "down"),
    left=KeyBinding(KeyPress(Key.LEFT), "left"),
    right=KeyBinding(KeyPress(Key.RIGHT), "right"),
    home=KeyBinding(KeyPress(Key.HOME), "home"),
    end=KeyBinding(KeyPress(Key.END), "end"),
    backspace=KeyBinding(KeyPress(Key.BACKSPACE), "backspace"),
    delete=KeyBinding(KeyPress(Key.DELETE), "delete"),
    submit=KeyBinding(KeyPress(Key.SUBMIT), "submit"),
    esc=KeyBinding(KeyPress(Key.ESC), "back"),
    next_server=KeyBinding(KeyPress(Key.TAB), "next server"),
    previous_server=KeyBinding(KeyPress(Key.BACK_TAB), "previous server"),
    quit=KeyBinding(KeyPress.of("q"), "quit"),
    add=KeyBinding(KeyPress.of("a"), "add"),
    edit=KeyBinding(KeyPress.of("e"), "edit"),
    search=KeyBinding(KeyPress.of("s"), "search"),
    filter=KeyBinding(KeyPress.of("f"), "filter"),
    refresh=KeyBinding(KeyPress.of("r"), "refresh"),
    update=KeyBinding(KeyPress.of("u"), "update"),
    clear=KeyBinding(KeyPress.of("c"), "clear"),
    auto_search=KeyBinding(KeyPress.of("s"), "auto search"),
    test=KeyBinding(KeyPress.of("t"), "test"),
    test_all=KeyBinding(KeyPress.of("T"), "test all"),
    logs=KeyBinding(KeyPress.of("l"), "logs"),
    tasks=KeyBinding(KeyPress.of("t"), "tasks"),
    events=KeyBinding(KeyPress.of("z"), "queued events"),
)


def build_context_clue_string(clues: Sequence[tuple[KeyBinding, str]]) -> str:
    """``[(binding, "details")]`` → ``"<enter> details | ..."``."""
    return " | ".join(f"<{binding.key.display}> {desc}" for binding, desc in clues)


_K = DEFAULT_KEYBINDINGS

# Footer help shown on every screen.
GLOBAL_CLUES: list[tuple[KeyBinding, str]] = [
    (_K.next_server, "change servarr"),
    (_K.left, "change tab"),
    (_K.esc, _K.esc.desc),
    (_K.quit, _K.quit.desc),
]

SEARCH_FILTER_CLUES: list[tuple[KeyBinding, str]] = [
    (_K.submit, "apply"),
    (_K.esc, "cancel"),
]

CONFIRMATION_PROMPT_CLUES: list[tuple[KeyBinding, str]] = [
    (_K.left, "yes/no"),
    (_K.submit, "confirm"),
    (_K.esc, "cancel"),
]

DOWNLOADS_CONTEXT_CLUES: list[tuple[KeyBinding, str]] = [
    (_K.refresh, _K.refresh.desc),
    (_K.delete, _K.delete.desc),
    (_K.update, "update downloads"),
]

BLOCKLIST_CONTEXT_CLUES: list[tuple[KeyBinding, str]] = [
    (_K.refresh, _K.refresh.desc),
    (_K.submit, "details"),
    (_K.delete, _K.delete.desc),
    (_K.clear, "clear blocklist"),
]

ROOT_FOLDERS_CONTEXT_CLUES: list[tuple[KeyBinding, str]] = [
    (_K.add, _K.add.desc),
    (_K.delete, _K.delete.desc),
    (_K.refresh, _K.refresh.desc),
]

INDEXERS_CONTEXT_CLUES: list[tuple[KeyBinding, str]] = [
    (_K.submit, "edit indexer"),
    (_K.delete, _K.delete.desc),
    (_K.test, "test indexer"),
    (_K.test_all, "test all indexers"),
    (_K.refresh, _K.refresh.desc),
]

SYSTEM_CONTEXT_CLUES: list[tuple[KeyBinding, str]] = [
    (_K.tasks, "open tasks"),
    (_K.events, "open queue"),
    (_K.logs, "open logs"),
    (_K.update, "open updates"),
    (_K.refresh, _K.refresh.desc),
]
