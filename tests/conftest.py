from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path.
2. Provides the shared sample manifest and a stub install info generator.
"""

import logging
import os
import sys
from typing import Callable, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from wixtree.domain.constants import PATH_SEPARATOR  # noqa: E402


def join(*parts: str) -> str:
    return PATH_SEPARATOR.join(parts)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_dirs() -> List[str]:
    """
    Directory manifest of a small application.

    a
    ├── b
    │   └── c
    └── d
    """
    return [join("a"), join("a", "b"), join("a", "b", "c"), join("a", "d")]


@pytest.fixture
def info_factory() -> Callable[[str], str]:
    """Install info generator that records calls instead of writing files."""
    calls: List[str] = []

    def factory(version: str) -> str:
        calls.append(version)
        return join("tmp", version, ".installInfo.json")

    factory.calls = calls  # type: ignore[attr-defined]
    return factory


@pytest.fixture
def reset_logging():
    """Detach the package's logging handlers before and after a test."""
    from wixtree.infra.logging import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
    from wixtree.infra.logging.handlers import _is_our_handler

    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener is not None and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if _is_our_handler(h):
                root.removeHandler(h)
                h.close()
        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()
