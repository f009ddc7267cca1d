from collections.abc import Mapping
from typing import Any

from loguru import logger
from sqlmodel import Session

from src.catalog.mediator.base import Query, QueryHandler
from src.catalog.mediator.registry import (
    HandlerNotFoundError,
    discover,
    registered_handlers,
)

HANDLER_PACKAGE = "src.catalog.handlers"


class Mediator:
    """In-process router sending each query to its registered handler.

    Handlers are built per call with the session of the current unit of work.
    """

    def __init__(
        self,
        session: Session,
        handlers: Mapping[type[Query], type[QueryHandler[Any, Any]]] | None = None,
    ) -> None:
        self._session = session
        if handlers is None:
            discover(HANDLER_PACKAGE)
            handlers = registered_handlers()
        self._handlers = dict(handlers)

    async def send(self, query: Query) -> Any:
        handler_cls = self._handlers.get(type(query))
        if handler_cls is None:
            raise HandlerNotFoundError(type(query))

        logger.debug("Dispatching {} to {}", type(query).__name__, handler_cls.__name__)
        return await handler_cls(self._session).handle(query)
