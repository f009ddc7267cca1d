# mediator/registry.py
"""
Query handler registry.

Maps each query type to the single handler class that serves it.

Usage:
    @handles(GetAllProductsQuery)
    class GetAllProductsHandler(QueryHandler[GetAllProductsQuery, list[Product]]):
        async def handle(self, query): ...
"""

import importlib
import pkgutil
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

from src.catalog.mediator.base import Query, QueryHandler


class HandlerNotFoundError(LookupError):
    """Raised when a query is sent that has no registered handler."""

    def __init__(self, query_type: type) -> None:
        super().__init__(f"No handler registered for {query_type.__name__}")
        self.query_type = query_type


# central registry: query type -> handler class
_HANDLER_BY_QUERY: dict[type[Query], type[QueryHandler[Any, Any]]] = {}


H = TypeVar("H", bound=type[QueryHandler[Any, Any]])


def handles(query_type: type[Query]) -> Callable[[H], H]:
    """
    Decorator registering a handler class for ``query_type``.

    Raises:
        ValueError: If another handler is already registered for the query type
    """

    def deco(handler_cls: H) -> H:
        existing = _HANDLER_BY_QUERY.get(query_type)
        if existing is not None and existing is not handler_cls:
            raise ValueError(
                f"{query_type.__name__} is already handled by {existing.__name__}"
            )
        _HANDLER_BY_QUERY[query_type] = handler_cls
        logger.debug(f"Registering handler {handler_cls.__name__} for '{query_type.__name__}'")
        return handler_cls

    return deco


def handler_for(query_type: type[Query]) -> type[QueryHandler[Any, Any]]:
    try:
        return _HANDLER_BY_QUERY[query_type]
    except KeyError:
        raise HandlerNotFoundError(query_type) from None


def registered_handlers() -> dict[type[Query], type[QueryHandler[Any, Any]]]:
    return dict(_HANDLER_BY_QUERY)


def discover(module_path: str) -> list[type[QueryHandler[Any, Any]]]:
    """
    Import every module in a package so its ``@handles`` decorators run.

    Args:
        module_path: Fully qualified package path (e.g., "src.catalog.handlers")

    Returns:
        Handler classes registered from that package
    """
    pkg = importlib.import_module(module_path)
    for m in pkgutil.iter_modules(pkg.__path__, prefix=f"{module_path}."):
        importlib.import_module(m.name)
    return [
        handler
        for handler in _HANDLER_BY_QUERY.values()
        if handler.__module__.startswith(f"{module_path}.")
    ]
