from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .view import RenderedView


class Renderer(ABC):
    """Rendering back end consumed by the list controller."""

    @abstractmethod
    def render_loading(self) -> None:
        """Show the neutral state used until the first fetch resolves."""

    @abstractmethod
    def render(self, view: RenderedView) -> None:
        """Materialize ``view``, replacing whatever was shown before."""

    @abstractmethod
    def scroll_to(self, anchor: str) -> None:
        """Bring the element identified by ``anchor`` into view."""


class ViewModelRenderer(Renderer):
    """Keeps the latest view model so a template or JSON endpoint can emit it.

    ``scroll_anchor`` is one-shot: :meth:`take_scroll_anchor` clears it.
    """

    def __init__(self) -> None:
        self.view: Optional[RenderedView] = None
        self.loading = False
        self.render_count = 0
        self.scroll_anchor: Optional[str] = None

    def render_loading(self) -> None:
        self.loading = True

    def render(self, view: RenderedView) -> None:
        self.loading = False
        self.view = view
        self.render_count += 1

    def scroll_to(self, anchor: str) -> None:
        self.scroll_anchor = anchor

    def take_scroll_anchor(self) -> Optional[str]:
        anchor, self.scroll_anchor = self.scroll_anchor, None
        return anchor
