"""Toast notifications and page navigation used by client pages."""

import logging
from dataclasses import dataclass, field
from typing import Literal

logger = logging.getLogger(__name__)

ToastType = Literal["success", "error", "info"]


@dataclass(frozen=True)
class Toast:
    title: str
    type: ToastType = "info"
    description: str | None = None


@dataclass
class Notifier:
    """Collects toasts in display order."""

    toasts: list[Toast] = field(default_factory=list)

    def add_toast(self, toast: Toast) -> None:
        logger.debug(f"Toast [{toast.type}] {toast.title}: {toast.description}")
        self.toasts.append(toast)

    @property
    def last(self) -> Toast | None:
        return self.toasts[-1] if self.toasts else None


@dataclass
class Router:
    """Records navigation. `history[-1]` is the current location."""

    history: list[str] = field(default_factory=lambda: ["/"])

    @property
    def location(self) -> str:
        return self.history[-1]

    async def push(self, path: str) -> None:
        self.history.append(path)
