"""Handlers for interaction callbacks and ways to chain them."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple

HandleFunc = Callable[[Any, Any], Optional[bytes]]
PartialHandleFunc = Callable[[Any, Any], Tuple[bool, Optional[bytes]]]

_log = logging.getLogger(__name__)


def _with_field(logger: Any, key: str, value: Any) -> logging.LoggerAdapter:
    """Return a logger adapter carrying an extra field on top of any existing ones."""
    if logger is None:
        logger = _log
    if isinstance(logger, logging.LoggerAdapter):
        extra = dict(logger.extra or {})
        extra[key] = value
        return logging.LoggerAdapter(logger.logger, extra)
    return logging.LoggerAdapter(logger, {key: value})


class Handler:
    """Handles an interaction callback, optionally returning a response body."""

    def __init__(self, identifier: str, handle: Optional[HandleFunc] = None) -> None:
        self.identifier = identifier
        self._handle = handle

    def handle(self, callback: Any, logger: Any) -> Optional[bytes]:
        if self._handle is None:
            raise NotImplementedError("handler has no handling function")
        return self._handle(callback, logger)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r})"


class PartialHandler:
    """A handler that reports whether it consumed the callback.

    ``handle`` returns ``(handled, output)``.
    """

    def __init__(self, identifier: str, handle: Optional[PartialHandleFunc] = None) -> None:
        self.identifier = identifier
        self._handle = handle

    def handle(self, callback: Any, logger: Any) -> Tuple[bool, Optional[bytes]]:
        if self._handle is None:
            raise NotImplementedError("handler has no handling function")
        return self._handle(callback, logger)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier!r})"


def handler_func(identifier: str, handle: HandleFunc) -> Handler:
    """Build a Handler from a plain function."""
    return Handler(identifier, handle)


def partial_handler_func(identifier: str, handle: PartialHandleFunc) -> PartialHandler:
    """Build a PartialHandler from a plain function."""
    return PartialHandler(identifier, handle)


def handler_from_partial(handler: PartialHandler) -> Handler:
    """Adapt a partial handler to a handler, dropping the handled flag."""

    def handle(callback: Any, logger: Any) -> Optional[bytes]:
        _, output = handler.handle(callback, logger)
        return output

    return Handler(handler.identifier, handle)


def partial_from_handler(handler: Handler) -> PartialHandler:
    """Adapt a handler to a partial handler that always consumes the callback."""

    def handle(callback: Any, logger: Any) -> Tuple[bool, Optional[bytes]]:
        return True, handler.handle(callback, logger)

    return PartialHandler(handler.identifier, handle)


def multi_handler(*handlers: PartialHandler) -> Handler:
    """Offer a callback to each partial handler in turn until one consumes it."""

    def handle(callback: Any, logger: Any) -> Optional[bytes]:
        for partial in handlers:
            logger = _with_field(logger, "handler", partial.identifier)
            handled, output = partial.handle(callback, logger)
            if handled:
                return output
        return None

    return Handler("multi_handler", handle)