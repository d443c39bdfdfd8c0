"""Library-wide defaults for PyClosure.

The defaults here are read whenever a call does not pass the matching
keyword explicitly. They are process-wide, not thread-local.

Example:
    >>> from pyclosure.config import config_context
    >>> with config_context(on_unsupported="raise"):
    ...     compute_closure(42)
    UnsupportedGraphError: ...
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, get_args

from pyclosure.core.types import UnsupportedPolicy

# =============================================================================
# DEFAULTS
# =============================================================================

# Vertex count at which numpy input switches to the parallel kernel
DEFAULT_PARALLEL_THRESHOLD = 500

UNSUPPORTED_POLICIES: tuple[str, ...] = get_args(UnsupportedPolicy)


@dataclass(frozen=True)
class ClosureConfig:
    """
    Defaults applied by the closure entry points.

    Attributes:
        on_unsupported: What compute_closure does with an object that is
            neither a dense matrix nor a labeled adjacency:
            - 'raise': raise UnsupportedGraphError
            - 'warn': return it unchanged with an UnsupportedGraphWarning
            - 'ignore': return it unchanged silently
        parallel_threshold: Vertex count at which 2-D numpy input is closed
            with the parallel Numba kernel instead of the serial one
    """

    on_unsupported: UnsupportedPolicy = "warn"
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD

    def __post_init__(self) -> None:
        validate_policy(self.on_unsupported)
        if isinstance(self.parallel_threshold, bool) or not isinstance(
            self.parallel_threshold, int
        ):
            raise ValueError(
                f"parallel_threshold must be an int, got {self.parallel_threshold!r}"
            )
        if self.parallel_threshold < 1:
            raise ValueError(
                f"parallel_threshold must be positive, got {self.parallel_threshold}"
            )


def validate_policy(policy: Any) -> UnsupportedPolicy:
    """Return *policy* if it is a known on_unsupported value, else raise."""
    if policy not in UNSUPPORTED_POLICIES:
        raise ValueError(
            f"on_unsupported must be one of {list(UNSUPPORTED_POLICIES)}, "
            f"got {policy!r}"
        )
    return policy


_config = ClosureConfig()


def get_config() -> ClosureConfig:
    """Return the active configuration."""
    return _config


def set_config(**changes: Any) -> ClosureConfig:
    """
    Replace fields of the active configuration.

    Args:
        **changes: Field values to change (on_unsupported, parallel_threshold)

    Returns:
        The configuration that was active before the change

    Raises:
        ValueError: If a field name or value is invalid
    """
    global _config
    previous = _config
    try:
        _config = replace(_config, **changes)
    except TypeError as e:
        raise ValueError(f"Unknown configuration field: {e}") from None
    return previous


@contextmanager
def config_context(**changes: Any) -> Iterator[ClosureConfig]:
    """Temporarily change configuration fields inside a ``with`` block."""
    global _config
    previous = set_config(**changes)
    try:
        yield _config
    finally:
        _config = previous
