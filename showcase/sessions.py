from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Callable, Optional

from .config.languages import LanguageTable, load_language_table
from .config.settings import Settings
from .core.controller import RepositoryListController, RepositorySource
from .render.renderer import ViewModelRenderer
from .store import HttpRepositorySource

logger = logging.getLogger(__name__)

ControllerFactory = Callable[[], RepositoryListController]


class ControllerRegistry:
    """One initialized list controller per browser session.

    Bounded LRU: when more than ``max_sessions`` sessions are live the least
    recently used controller is dropped together with its records and state.
    """

    def __init__(self, factory: ControllerFactory, max_sessions: int = 256) -> None:
        self._factory = factory
        self._max_sessions = max(1, max_sessions)
        self._controllers: "OrderedDict[str, RepositoryListController]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._controllers)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._controllers

    def get(self, session_id: str) -> RepositoryListController:
        """Return the session's controller, creating and initializing it on first use."""

        with self._lock:
            controller = self._controllers.get(session_id)
            if controller is not None:
                self._controllers.move_to_end(session_id)
                return controller

            controller = self._factory()
            self._controllers[session_id] = controller
            while len(self._controllers) > self._max_sessions:
                evicted, _ = self._controllers.popitem(last=False)
                logger.debug("Evicted list controller for session %s", evicted)

        # 首次访问时拉取数据（锁外执行，避免阻塞其它会话）
        controller.initialize()
        return controller

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._controllers.pop(session_id, None)


def make_source(settings: Settings) -> RepositorySource:
    if settings.use_sample_data:
        from data import StaticRepositorySource

        return StaticRepositorySource()
    return HttpRepositorySource(settings.repositories_url, timeout=settings.fetch_timeout)


def make_controller_factory(
    settings: Settings,
    source_factory: Optional[Callable[[], RepositorySource]] = None,
    languages: Optional[LanguageTable] = None,
) -> ControllerFactory:
    table = languages or load_language_table(settings.languages_file)

    def factory() -> RepositoryListController:
        source = source_factory() if source_factory is not None else make_source(settings)
        return RepositoryListController(source, ViewModelRenderer(), settings, table)

    return factory
