"""
UI State Management - Enums and Data Structures
"""
from enum import Enum
from dataclasses import dataclass, field
from typing import Tuple, Optional

from ...catalog import GameEntry, Viewer


class SessionState(Enum):
    """Menu session states"""
    LOADING = "loading"              # created, entries not supplied yet
    EMPTY = "empty"                  # no games for this viewer
    HAS_SELECTION = "has_selection"
    ACTIVATED = "activated"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.ACTIVATED, SessionState.QUIT)


@dataclass
class SelectionData:
    """Entries offered to the viewer and the current selection"""
    entries: Tuple[GameEntry, ...] = ()
    selected_index: Optional[int] = None

    def get_selected_item(self) -> Optional[GameEntry]:
        if self.selected_index is not None and 0 <= self.selected_index < len(self.entries):
            return self.entries[self.selected_index]
        return None


@dataclass
class SessionContext:
    """Everything one viewer's menu session owns. Discarded when the session ends."""
    viewer: Viewer
    selection: SelectionData = field(default_factory=SelectionData)
    state: SessionState = SessionState.LOADING

    # Results
    activated_entry: Optional[GameEntry] = None
    tick_count: int = 0
