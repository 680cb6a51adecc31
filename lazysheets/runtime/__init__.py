"""Public runtime orchestration entry points.

This package groups the interactive browser bootstrap (`run_browser`) with
the loop, terminal, config and logging modules it composes.
"""

from __future__ import annotations


def run_browser(*args, **kwargs):
    """Lazily import the browser entrypoint to keep package imports light."""
    from .app import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


__all__ = ["run_browser"]
