"""Application wiring.

Three bindings make up the application: the network repository, the
network it loads, and the coordination service built on that network.
Each is created on first use and shared afterwards. Tests swap a binding
with ``register`` before anything resolves it.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazily built, shared instances keyed by type.

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type, Callable[[], Any]] = field(default_factory=dict, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, key: type, factory: Callable[[], Any]) -> None:
        """Bind ``key`` to ``factory``, dropping any instance already built."""
        with self._lock:
            self._factories[key] = factory
            self._instances.pop(key, None)

    def resolve(self, key: type) -> Any:
        """Return the shared instance for ``key``, building it on first use.

        Raises:
            KeyError: If nothing is registered for ``key``.
        """
        with self._lock:
            if key not in self._instances:
                if key not in self._factories:
                    raise KeyError(f"Type not registered: {key}")
                self._instances[key] = self._factories[key]()
            return self._instances[key]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the CSV-backed production bindings.

        Nothing is read from disk until the network or the coordination
        service is first resolved; the CSV files are looked up under
        ``config.network.data_dir`` (EMS_NETWORK_DATA_DIR).
        """
        from .adapters.network import CSVNetworkRepository
        from .network import StationNetwork
        from .ports.network import NetworkRepositoryPort
        from .services import CoordinationService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            NetworkRepositoryPort,
            lambda: CSVNetworkRepository(config.network),
        )
        container.register(
            StationNetwork,
            lambda: container.resolve(NetworkRepositoryPort).load(),
        )
        container.register(
            CoordinationService,
            lambda: CoordinationService(
                network=container.resolve(StationNetwork),
                config=config.network,
            ),
        )
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the process-wide container, creating it if needed."""
    global _default_container
    with _container_lock:
        if _default_container is None:
            _default_container = Container.create_default()
        return _default_container


def reset_container() -> None:
    """Forget the process-wide container so the next call rebuilds it."""
    global _default_container
    with _container_lock:
        _default_container = None
