"""
Event System - Non-blocking event dispatcher
"""
from collections import deque
from enum import Enum
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple
import logging
import os
import sys

logger = logging.getLogger(__name__)

ESC = "\x1b"

# Bytes read from the terminal per poll
READ_SIZE = 64


def split_keys(text: str) -> Tuple[List[str], str]:
    """
    Split terminal input into single keys.

    ESC [ ... final byte and ESC O x count as one key, any other
    character is a key of its own. A lone ESC at the end is the Escape
    key.

    Returns:
        (keys, remainder) where remainder is an escape sequence cut off
        at the end of `text`, to be completed by the next read
    """
    keys = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != ESC or i + 1 >= len(text) or text[i + 1] not in "[O":
            keys.append(ch)
            i += 1
            continue

        if text[i + 1] == "O":
            if i + 2 >= len(text):
                return keys, text[i:]
            keys.append(text[i:i + 3])
            i += 3
            continue

        # CSI: parameters up to a final byte in @..~
        end = i + 2
        while end < len(text) and not "@" <= text[end] <= "~":
            end += 1
        if end >= len(text):
            return keys, text[i:]
        keys.append(text[i:end + 1])
        i = end + 1
    return keys, ""


class EventType(Enum):
    """Event types"""
    KEYBOARD = "keyboard"


@dataclass
class Event:
    """Event data structure"""
    type: EventType
    key: Optional[str] = None


class EventDispatcher:
    """
    Non-blocking keyboard event dispatcher.

    Reads the Windows console through msvcrt, or a POSIX terminal in
    cbreak mode while the dispatcher is entered as a context manager.
    Keys can also be injected with `push`, which is how a host that owns
    its own input hands events to the menu.
    """

    def __init__(self, read_terminal: bool = True):
        self._pending: Deque[str] = deque()
        self._read_terminal = read_terminal
        self._has_msvcrt = False
        self._posix_fd: Optional[int] = None
        self._posix_attr = None
        self._partial = ""
        if read_terminal:
            self._setup_input()

    def _setup_input(self):
        """Setup non-blocking input on Windows"""
        try:
            import msvcrt
            self._msvcrt = msvcrt
            self._has_msvcrt = True
        except ImportError:
            self._has_msvcrt = False

    def __enter__(self):
        if self._read_terminal and not self._has_msvcrt:
            self._enter_cbreak()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._restore_terminal()
        return False

    def _enter_cbreak(self):
        """Cbreak mode lets us read keys without waiting for a newline."""
        try:
            if not sys.stdin.isatty():
                return
            import termios  # POSIX
            import tty  # POSIX
            fd = sys.stdin.fileno()
            self._posix_attr = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            self._posix_fd = fd
        except (ImportError, OSError, ValueError) as e:
            logger.warning(f"Keyboard input unavailable: {e}")
            self._posix_fd = None

    def _restore_terminal(self):
        if self._posix_fd is None:
            return
        try:
            import termios  # POSIX
            termios.tcsetattr(self._posix_fd, termios.TCSADRAIN, self._posix_attr)
        except (ImportError, OSError) as e:
            logger.warning(f"Failed to restore terminal: {e}")
        finally:
            self._posix_fd = None

    def push(self, key: str):
        """Queue a key as if it had been typed"""
        self._pending.append(key)

    def get_event(self, timeout: float = 0.0) -> Optional[Event]:
        """
        Get next event (non-blocking)

        Args:
            timeout: Timeout in seconds (0.0 = immediate return)

        Returns:
            Event or None if no event available
        """
        if self._pending:
            return Event(type=EventType.KEYBOARD, key=self._pending.popleft())

        key = None
        if self._has_msvcrt:
            if self._msvcrt.kbhit():
                key = self._read_key()
        elif self._posix_fd is not None:
            key = self._read_posix_key(timeout)

        if key:
            return Event(type=EventType.KEYBOARD, key=key)
        return None

    def _read_key(self) -> Optional[str]:
        """Read a key from keyboard (handles arrow keys)"""
        ch = self._msvcrt.getwch()
        # Arrow keys and special keys arrive as two characters
        if ch in ("\x00", "\xe0"):
            ch2 = self._msvcrt.getwch()
            return ch + ch2
        return ch

    def _read_posix_key(self, timeout: float) -> Optional[str]:
        """Read one key or escape sequence from a cbreak terminal"""
        import select  # POSIX
        r, _, _ = select.select([self._posix_fd], [], [], max(0.0, timeout))
        if not r:
            return None
        chunk = os.read(self._posix_fd, READ_SIZE)
        if not chunk:
            return None
        # Several keys typed during one tick arrive in one chunk
        keys, self._partial = split_keys(self._partial + chunk.decode("utf-8", errors="ignore"))
        if not keys:
            return None
        self._pending.extend(keys[1:])
        return keys[0]
