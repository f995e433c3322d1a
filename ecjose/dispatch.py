"""Capability-based fallback between signing backends."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

from .errors import NoBackendAvailable

BackendFn = Callable[..., Awaitable[Any]]


def setup_fallback(*candidates: Optional[BackendFn]) -> BackendFn:
    """Combine ``candidates`` into one coroutine function.

    Candidates are given in order of preference.  ``None`` marks a backend
    whose capability is absent and is skipped.  The first present candidate
    handles every call; its errors reach the caller unchanged and never cause
    a later candidate to be tried.
    """

    selected = next((fn for fn in candidates if fn is not None), None)

    async def dispatch(*args: Any, **kwargs: Any) -> Any:
        if selected is None:
            raise NoBackendAvailable("no ECDSA backend available")
        return await selected(*args, **kwargs)

    return dispatch


__all__ = ["BackendFn", "setup_fallback"]
