"""Per-computation geometry tolerances.

The active `GeometryConfig` lives in a context variable so that concurrent
callers (threads, tasks, or worker processes) can each run with their own
tolerances without threading a config argument through every function.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from planecut.config.settings import GeometryConfig

_current_geometry: ContextVar[GeometryConfig] = ContextVar(
    "planecut_geometry", default=GeometryConfig()
)


def current_geometry() -> GeometryConfig:
    """Return the geometry tolerances active in the current context."""
    return _current_geometry.get()


@contextmanager
def geometry_context(config: GeometryConfig) -> Iterator[GeometryConfig]:
    """Run a block with the given geometry tolerances.

    Args:
        config: Tolerances to activate for the duration of the block

    Yields:
        The activated configuration

    Examples:
        >>> strict = GeometryConfig(epsilon=1e-15)
        >>> with geometry_context(strict):
        ...     current_geometry().epsilon
        1e-15
    """
    token = _current_geometry.set(config)
    try:
        yield config
    finally:
        _current_geometry.reset(token)
