"""
Keyboard Mapping Configuration

Raw key codes are translated to a small set of menu commands, so the
controller never sees physical keys.
"""
from enum import Enum
from typing import Dict, Optional, Set


class Command(Enum):
    """Menu commands"""
    UP = "up"
    DOWN = "down"
    ACTIVATE = "activate"
    QUIT = "quit"
    # Numeric keypad scroll bindings
    ALT_UP = "alt_up"
    ALT_DOWN = "alt_down"


class KeyMap:
    """Keyboard shortcuts and key codes"""

    # Arrow keys (Windows msvcrt and ANSI escape sequences)
    UP_KEYS: Set[str] = {"\xe0H", "\x00H", "\x1b[A", "\x1bOA", "w", "W"}
    DOWN_KEYS: Set[str] = {"\xe0P", "\x00P", "\x1b[B", "\x1bOB", "s", "S"}

    # Jump / Enter starts the selected game
    ACTIVATE_KEYS: Set[str] = {" ", "\r", "\n", "\r\n"}

    # Sneak / ESC / the global F key leave the menu
    ESC_KEY = "\x1b"
    QUIT_KEYS: Set[str] = {"q", "Q", ESC_KEY, "f", "F"}

    # Scroll bindings: moving away from NUM_9 lands on 8 (up) or 1 (down)
    ALT_UP_KEYS: Set[str] = {"8"}
    ALT_DOWN_KEYS: Set[str] = {"1"}

    KEY_COMMANDS: Dict[str, Command] = {
        **{key: Command.UP for key in UP_KEYS},
        **{key: Command.DOWN for key in DOWN_KEYS},
        **{key: Command.ACTIVATE for key in ACTIVATE_KEYS},
        **{key: Command.QUIT for key in QUIT_KEYS},
        **{key: Command.ALT_UP for key in ALT_UP_KEYS},
        **{key: Command.ALT_DOWN for key in ALT_DOWN_KEYS},
    }

    @classmethod
    def command_for(cls, key: Optional[str]) -> Optional[Command]:
        """Command bound to `key`, or None if the key is not bound"""
        if key is None:
            return None
        return cls.KEY_COMMANDS.get(key)

