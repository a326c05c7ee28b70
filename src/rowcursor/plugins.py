"""Result handle backend discovery via Python entry points."""

from importlib.metadata import entry_points
from typing import Any

from rowcursor.exceptions import BackendNotFoundError
from rowcursor.protocols import ResultHandle

BACKEND_GROUP = "rowcursor.backends"


def discover_backends() -> dict[str, Any]:
    """Discover all registered result handle backends.

    Returns:
        Dictionary mapping backend names to their classes
    """
    eps = entry_points(group=BACKEND_GROUP)
    return {ep.name: ep.load() for ep in eps}


def get_backend(name: str) -> Any:
    """Get a result handle backend class by name.

    Args:
        name: The backend name (e.g., "memory", "sqlite")

    Returns:
        The backend class

    Raises:
        BackendNotFoundError: If the backend is not registered
    """
    backends = discover_backends()
    if name not in backends:
        available = ", ".join(sorted(backends.keys())) or "(none)"
        raise BackendNotFoundError(
            f"Backend '{name}' not found in group '{BACKEND_GROUP}'. Available: {available}"
        )
    return backends[name]


def create_result_handle(backend: str, *args: Any, **kwargs: Any) -> ResultHandle:
    """Create a ResultHandle instance.

    Args:
        backend: The backend name (e.g., "memory", "sqlite")
        *args: Backend-specific positional arguments
        **kwargs: Backend-specific configuration

    Returns:
        A ResultHandle implementation
    """
    cls = get_backend(backend)
    return cls(*args, **kwargs)
