"""Dependency injection container.

Maps a port type to the factory that builds it. Every binding is built
once, on first resolve. start.py resolves the service from the default
container; tests wire their own container around fake repositories.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Lazily built, shared instances keyed by port type.

    Attributes:
        config: Application configuration the default bindings read
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    # Reentrant: a factory may resolve its own dependencies.
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind ``port_type`` to ``factory``, dropping any instance built earlier."""
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[T]) -> T:
        """Return the shared instance for ``port_type``.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._instances:
                try:
                    factory = self._factories[port_type]
                except KeyError:
                    raise KeyError(f"Type not registered: {port_type}") from None
                self._instances[port_type] = factory()
            return self._instances[port_type]

    def __contains__(self, port_type: object) -> bool:
        return port_type in self._factories

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the TSV repository and the campus map service."""
        from .adapters.graph import TSVMapRepository
        from .ports.graph import MapRepositoryPort
        from .services import CampusMapService

        container = cls(config=config or get_config())
        graph_config = container.config.graph

        container.register(MapRepositoryPort, lambda: TSVMapRepository(graph_config))
        container.register(
            CampusMapService,
            lambda: CampusMapService(repository=container.resolve(MapRepositoryPort)),
        )
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, building it on first use."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Forget the process-wide container; the next call builds a new one."""
    global _default_container
    with _container_lock:
        _default_container = None
