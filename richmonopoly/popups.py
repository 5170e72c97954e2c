"""Messages shown to the players in pop-up windows."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class PopupKind(enum.Enum):
    MESSAGE = "message"
    BUY = "buy"
    UPGRADE = "upgrade"
    END = "end"
    BANKRUPTCY = "bankruptcy"


@dataclass(frozen=True)
class Popup:
    kind: PopupKind
    message: str


@dataclass
class PopupLog:
    """Every pop-up opened so far, and the latest message of each kind."""

    history: list[Popup] = field(default_factory=list)
    _last: dict[PopupKind, str] = field(default_factory=dict, repr=False)

    def show(self, kind: PopupKind, message: str) -> Popup:
        """Open a pop-up of ``kind`` showing ``message``."""
        popup = Popup(PopupKind(kind), message)
        self.history.append(popup)
        self._last[popup.kind] = message
        return popup

    def last(self, kind: PopupKind) -> str:
        """Latest message shown in a pop-up of ``kind``; empty if none was."""
        return self._last.get(PopupKind(kind), "")