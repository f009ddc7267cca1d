from .base import Query, QueryHandler
from .mediator import Mediator
from .registry import HandlerNotFoundError, handler_for, handles

__all__ = [
    "HandlerNotFoundError",
    "Mediator",
    "Query",
    "QueryHandler",
    "handler_for",
    "handles",
]
