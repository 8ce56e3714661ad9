from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator

# Per-run fields (nickname, game, player_id) attached to every log record.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("statclock_log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


@contextmanager
def context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Bind ``values`` for the duration of a ``with`` block."""
    current = get_context()
    current.update({k: v for k, v in values.items() if v is not None})
    token = _context.set(current)
    try:
        yield current
    finally:
        _context.reset(token)
