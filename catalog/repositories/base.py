"""
Generic SQLAlchemy Repository

Every entity is stored through the same five operations:

    create(data, relations)       insert a row, optionally with edges
    find_many(where, offset, count, include)
    find_one(id, include)
    update(id, data, relations)
    delete(id)

Each write is one transaction. Scalar columns and relation edges are
committed together, and any IntegrityError rolls the whole call back and
surfaces as StoreReferentialError.

Relation edges are written straight to the association table instead of
through the ORM collection. That keeps "connect" and "replace" explicit
and lets the database reject ids that reference nothing.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, TypeVar

from sqlalchemy import Table, delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.sql.expression import ColumnElement

from catalog.database import Base
from catalog.exceptions import NotFoundError, StoreReferentialError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@dataclass(frozen=True)
class RelationDirective:
    """
    How a write should treat one relation's edge set.

    connect: add edges to the listed ids, keep existing ones
    replace: make the edge set exactly the listed ids
    """

    mode: Literal["connect", "replace"]
    ids: tuple[int, ...]

    @classmethod
    def connect(cls, ids: Iterable[int]) -> "RelationDirective":
        return cls("connect", _unique(ids))

    @classmethod
    def replace(cls, ids: Iterable[int]) -> "RelationDirective":
        return cls("replace", _unique(ids))


@dataclass(frozen=True)
class RelationTable:
    """Association table backing one relation, with its two key columns."""

    table: Table
    owner_column: str
    target_column: str


def _unique(ids: Iterable[int]) -> tuple[int, ...]:
    # dict.fromkeys keeps first-seen order
    return tuple(dict.fromkeys(ids))


class Repository(Generic[ModelT]):
    """
    Store for one model class.

    Subclasses that own many-to-many edges list them in
    ``relation_tables`` keyed by relationship name.
    """

    relation_tables: ClassVar[dict[str, RelationTable]] = {}

    def __init__(self, session: Session, model: type[ModelT]) -> None:
        self.session = session
        self.model = model

    @property
    def entity(self) -> str:
        return self.model.__name__

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def _select(self, include: Sequence[str] = ()):
        stmt = select(self.model)
        if include:
            stmt = stmt.options(
                *(selectinload(getattr(self.model, name)) for name in include)
            )
        return stmt

    def find_many(
        self,
        where: ColumnElement[bool] | None = None,
        offset: int = 0,
        count: int | None = None,
        include: Sequence[str] = (),
    ) -> list[ModelT]:
        """
        Fetch rows matching ``where``, skipping ``offset`` and returning
        at most ``count``. Rows come back in primary key order.
        """
        stmt = self._select(include)
        if where is not None:
            stmt = stmt.where(where)
        stmt = stmt.order_by(self.model.id).offset(offset)
        if count is not None:
            stmt = stmt.limit(count)
        return list(self.session.execute(stmt).scalars().all())

    def find_one(self, entity_id: int, include: Sequence[str] = ()) -> ModelT | None:
        stmt = self._select(include).where(self.model.id == entity_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_ids(self, ids: Iterable[int]) -> list[ModelT]:
        ids = list(ids)
        if not ids:
            return []
        stmt = select(self.model).where(self.model.id.in_(ids)).order_by(self.model.id)
        return list(self.session.execute(stmt).scalars().all())

    def count(self, where: ColumnElement[bool] | None = None) -> int:
        stmt = select(func.count()).select_from(self.model)
        if where is not None:
            stmt = stmt.where(where)
        return self.session.execute(stmt).scalar() or 0

    def get_or_raise(self, entity_id: int, include: Sequence[str] = ()) -> ModelT:
        row = self.find_one(entity_id, include)
        if row is None:
            logger.info(f"{self.entity} {entity_id} not found")
            raise NotFoundError(self.entity, entity_id)
        return row

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def create(
        self,
        data: dict[str, Any],
        relations: dict[str, RelationDirective] | None = None,
        include: Sequence[str] = (),
    ) -> ModelT:
        """Insert a row and its relation edges in one transaction."""
        row = self.model(**data)
        with self._write():
            self.session.add(row)
            self.session.flush()
            self._apply_relations(row.id, relations)
        logger.info(f"Created {self.entity} {row.id}")
        return self._reload(row.id, include)

    def update(
        self,
        entity_id: int,
        data: dict[str, Any],
        relations: dict[str, RelationDirective] | None = None,
        include: Sequence[str] = (),
    ) -> ModelT:
        """
        Write ``data`` onto an existing row and apply relation directives.

        Raises:
            NotFoundError: no row has this id
            StoreReferentialError: the database rejected an edge
        """
        row = self.get_or_raise(entity_id)
        for field, value in data.items():
            setattr(row, field, value)
        with self._write():
            self.session.flush()
            self._apply_relations(entity_id, relations)
        logger.info(f"Updated {self.entity} {entity_id}")
        return self._reload(entity_id, include)

    def delete(self, entity_id: int) -> ModelT:
        """
        Delete a row and return it as it was.

        Edges pointing at the row are removed; rows on the other side of
        those edges are left alone.
        """
        row = self.get_or_raise(entity_id)
        with self._write():
            self.session.delete(row)
            self.session.flush()
        logger.info(f"Deleted {self.entity} {entity_id}")
        return row

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------
    @contextmanager
    def _write(self) -> Iterator[Session]:
        """
        Commit on success. On IntegrityError roll back and raise
        StoreReferentialError; any other error rolls back and propagates.
        """
        try:
            yield self.session
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(f"Store rejected {self.entity} write: {exc.orig}")
            raise StoreReferentialError(
                f"{self.entity} write rejected by an integrity constraint: "
                "a referenced row does not exist"
            ) from exc
        except Exception:
            self.session.rollback()
            raise

    def _reload(self, entity_id: int, include: Sequence[str]) -> ModelT:
        # populate_existing refreshes relations rewritten through the association table
        stmt = (
            self._select(include)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return self.session.execute(stmt).scalar_one()

    def _apply_relations(
        self,
        owner_id: int,
        relations: dict[str, RelationDirective] | None,
    ) -> None:
        for name, directive in (relations or {}).items():
            link = self.relation_tables[name]
            owner = link.table.c[link.owner_column]
            target = link.table.c[link.target_column]

            if directive.mode == "replace":
                self.session.execute(delete(link.table).where(owner == owner_id))
                new_ids = list(directive.ids)
            else:
                existing = set(
                    self.session.execute(
                        select(target).where(owner == owner_id)
                    ).scalars()
                )
                new_ids = [i for i in directive.ids if i not in existing]

            if new_ids:
                self.session.execute(
                    insert(link.table),
                    [
                        {link.owner_column: owner_id, link.target_column: target_id}
                        for target_id in new_ids
                    ],
                )

