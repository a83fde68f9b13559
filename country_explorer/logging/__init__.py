"""Structured logging helpers for the country explorer."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that tags records with a component without clobbering call extras."""

    def process(self, msg, kwargs):
        call_extra = kwargs.get("extra", {})
        # Fields passed at the call site win over the adapter defaults
        kwargs["extra"] = {**self.extra, **call_extra}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Return the named logger, wrapped to add a ``component`` field when given.

    Args:
        name: Logger name (normally ``__name__``)
        component: Short subsystem label such as "fetcher" or "web"

    Example:
        >>> logger = get_logger(__name__, component="lookup")
        >>> logger.info("Search completed", extra={"event": "lookup.search.completed"})
    """
    logger = logging.getLogger(name)
    if component:
        return ComponentLoggerAdapter(logger, {"component": component})
    return logger


__all__ = ["ComponentLoggerAdapter", "get_logger"]
