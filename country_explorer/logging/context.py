"""Request-scoped logging context.

Fields pushed here are copied onto every log record emitted inside the scope
(see ContextualFilter). Backed by contextvars, so concurrent requests served
by different threads or tasks never see each other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional


_request_context: ContextVar[Dict[str, Any]] = ContextVar("request_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current scope."""
    return _request_context.get().copy()


def push_log_context(**fields: Any) -> Token:
    """Merge ``fields`` into the active context.

    Returns:
        Token to hand back to pop_log_context() to restore the prior fields

    Example:
        >>> token = push_log_context(request_id="3f9c", search_kind="capital")
        >>> # ... every log line now carries request_id and search_kind ...
        >>> pop_log_context(token)
    """
    merged = {**_request_context.get(), **fields}
    return _request_context.set(merged)


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before the matching push."""
    _request_context.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Mostly useful in tests."""
    _request_context.set({})


class log_context:
    """Context manager form of push/pop.

    Example:
        >>> with log_context(request_id="3f9c"):
        ...     logger.info("Search received")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
        return False
