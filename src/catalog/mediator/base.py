# mediator/base.py
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from sqlmodel import Session


class Query(BaseModel):
    """Base class for read requests dispatched through the mediator."""

    model_config = ConfigDict(frozen=True)


TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Handles exactly one query type against a unit-of-work session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult: ...
