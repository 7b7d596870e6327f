"""Relation-oriented async client for the campus data store.

Every call is single-shot: it opens its own session, runs one statement (plus
one lookup per embedded relation) and closes. Failures are raised as
``DataServiceError`` carrying a machine-readable ``ErrorKind``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.enums import ErrorKind
from app.core.exceptions import DataServiceError
from app.core.models import RELATIONS
from app.db.session import AsyncSessionLocal

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


@dataclass(frozen=True)
class Embed:
    """Nest the row referenced by ``foreign_key`` under ``alias`` on each parent row."""

    relation: str
    foreign_key: str
    alias: str
    select: Sequence[str] = ("id", "name")


def _sqlstate(exc: BaseException) -> Optional[str]:
    orig = getattr(exc, "orig", None)
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        code = getattr(candidate, "sqlstate", None) or getattr(candidate, "pgcode", None)
        if code:
            return str(code)
    return None


def classify_integrity_error(exc: IntegrityError) -> ErrorKind:
    code = _sqlstate(exc)
    if code == UNIQUE_VIOLATION:
        return ErrorKind.UNIQUENESS_CONFLICT
    if code == FOREIGN_KEY_VIOLATION:
        return ErrorKind.REFERENTIAL_CONFLICT
    text = str(getattr(exc, "orig", None) or exc).lower()
    if "unique constraint" in text or "duplicate key" in text:
        return ErrorKind.UNIQUENESS_CONFLICT
    if "foreign key" in text:
        return ErrorKind.REFERENTIAL_CONFLICT
    return ErrorKind.GENERIC


def _raw_message(exc: BaseException) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class DataServiceClient:
    def __init__(self, sessionmaker: async_sessionmaker = AsyncSessionLocal) -> None:
        self._sessionmaker = sessionmaker

    # ----- relation / column resolution -----

    @staticmethod
    def _model(relation: str):
        model = RELATIONS.get(relation)
        if model is None:
            raise DataServiceError(ErrorKind.GENERIC, f"Unknown relation '{relation}'")
        return model

    @staticmethod
    def _column(model, name: str):
        try:
            return model.__table__.c[name]
        except KeyError:
            raise DataServiceError(
                ErrorKind.GENERIC, f"Unknown column '{name}' on relation '{model.__tablename__}'"
            )

    def _check_columns(self, model, names: Iterable[str]) -> None:
        for name in names:
            self._column(model, name)

    def _where(self, model, stmt, filters: Optional[Mapping[str, Any]]):
        for name, value in (filters or {}).items():
            column = self._column(model, name)
            if isinstance(value, (list, tuple, set, frozenset)):
                stmt = stmt.where(column.in_(list(value)))
            elif value is None:
                stmt = stmt.where(column.is_(None))
            else:
                stmt = stmt.where(column == value)
        return stmt

    @staticmethod
    def _row_dict(model, obj) -> Dict[str, Any]:
        return {c.key: getattr(obj, c.key) for c in model.__table__.columns}

    # ----- reads -----

    async def _select(
        self,
        session,
        relation: str,
        select_columns: Optional[Sequence[str]],
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        model = self._model(relation)
        if select_columns:
            columns = [self._column(model, name) for name in dict.fromkeys(select_columns)]
        else:
            columns = list(model.__table__.columns)
        stmt = self._where(model, select(*columns), filters)
        if order_by:
            order_col = self._column(model, order_by)
            stmt = stmt.order_by(order_col.asc() if ascending else order_col.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return [dict(row) for row in result.mappings().all()]

    async def _attach(self, session, rows: List[Dict[str, Any]], embed: Embed) -> None:
        ids = {row.get(embed.foreign_key) for row in rows}
        ids.discard(None)
        by_id: Dict[Any, Dict[str, Any]] = {}
        if ids:
            columns = ("id",) + tuple(c for c in embed.select if c != "id")
            for child in await self._select(session, embed.relation, columns, filters={"id": ids}):
                by_id[child["id"]] = child
        for row in rows:
            row[embed.alias] = by_id.get(row.get(embed.foreign_key))

    async def list(
        self,
        relation: str,
        select: Optional[Sequence[str]] = None,
        embed: Sequence[Embed] = (),
        order_by: Optional[str] = "id",
        ascending: bool = True,
        filters: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Read rows of ``relation`` with embedded foreign rows resolved in-app."""
        columns = list(select) if select else None
        if columns is not None:
            for e in embed:
                if e.foreign_key not in columns:
                    columns.append(e.foreign_key)
        try:
            async with self._sessionmaker() as session:
                rows = await self._select(session, relation, columns, filters, order_by, ascending, limit)
                for e in embed:
                    await self._attach(session, rows, e)
                return rows
        except SQLAlchemyError as exc:
            logger.error("list %s failed: %s", relation, exc)
            raise DataServiceError(ErrorKind.GENERIC, _raw_message(exc))

    async def count(self, relation: str, filters: Optional[Mapping[str, Any]] = None) -> int:
        model = self._model(relation)
        stmt = self._where(model, select(func.count()).select_from(model.__table__), filters)
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(stmt)
                return int(result.scalar_one())
        except SQLAlchemyError as exc:
            logger.error("count %s failed: %s", relation, exc)
            raise DataServiceError(ErrorKind.GENERIC, _raw_message(exc))

    # ----- writes -----

    def _write_error(self, operation: str, relation: str, exc: SQLAlchemyError) -> DataServiceError:
        kind = classify_integrity_error(exc) if isinstance(exc, IntegrityError) else ErrorKind.GENERIC
        logger.warning("%s %s rejected (%s): %s", operation, relation, kind.value, _raw_message(exc))
        return DataServiceError(kind, _raw_message(exc))

    async def insert(self, relation: str, record: Mapping[str, Any]) -> Dict[str, Any]:
        model = self._model(relation)
        values = {k: v for k, v in record.items() if k != "id"}
        self._check_columns(model, values)
        async with self._sessionmaker() as session:
            try:
                obj = model(**values)
                session.add(obj)
                await session.commit()
                await session.refresh(obj)
            except SQLAlchemyError as exc:
                await session.rollback()
                raise self._write_error("insert", relation, exc)
            logger.info("inserted %s id=%s", relation, obj.id)
            return self._row_dict(model, obj)

    async def update(self, relation: str, key: int, patch: Mapping[str, Any]) -> Dict[str, Any]:
        model = self._model(relation)
        values = {k: v for k, v in patch.items() if k != "id"}
        self._check_columns(model, values)
        async with self._sessionmaker() as session:
            try:
                obj = await session.get(model, key)
                if obj is None:
                    raise DataServiceError(ErrorKind.NOT_FOUND, f"{relation} {key} not found")
                for name, value in values.items():
                    setattr(obj, name, value)
                await session.commit()
                await session.refresh(obj)
            except SQLAlchemyError as exc:
                await session.rollback()
                raise self._write_error("update", relation, exc)
            logger.info("updated %s id=%s", relation, key)
            return self._row_dict(model, obj)

    async def delete(self, relation: str, key: int) -> None:
        model = self._model(relation)
        async with self._sessionmaker() as session:
            try:
                obj = await session.get(model, key)
                if obj is None:
                    raise DataServiceError(ErrorKind.NOT_FOUND, f"{relation} {key} not found")
                await session.delete(obj)
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                raise self._write_error("delete", relation, exc)
        logger.info("deleted %s id=%s", relation, key)


def get_data_service() -> DataServiceClient:
    """FastAPI dependency: client bound to the application's session factory."""
    return DataServiceClient(AsyncSessionLocal)
