# app/repository.py

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

from .errors import NotFoundError

ModelT = TypeVar("ModelT", bound=SQLModel)

SQL_INT_MIN = -(2**63)
SQL_INT_MAX = 2**63 - 1


class Repository(Generic[ModelT]):
    """find/save/exists/delete over one table.

    The session is passed in by the caller; one repository lives for one
    request. ``exists_by_id`` followed by ``save``/``delete_by_id`` is not
    atomic.
    """

    def __init__(self, model: Type[ModelT], session: Session):
        self.model = model
        self.session = session
        self._pk = inspect(model).primary_key[0]

    def find_all(self) -> List[ModelT]:
        return list(self.session.exec(select(self.model).order_by(self._pk)).all())

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        # ids outside the 64-bit INTEGER range can never be stored
        if not SQL_INT_MIN <= entity_id <= SQL_INT_MAX:
            return None
        return self.session.get(self.model, entity_id)

    def exists_by_id(self, entity_id: int) -> bool:
        return self.find_by_id(entity_id) is not None

    def find_by(self, column, value) -> List[ModelT]:
        stmt = select(self.model).where(column == value).order_by(self._pk)
        return list(self.session.exec(stmt).all())

    def save(self, entity: ModelT) -> ModelT:
        # merge inserts when the id is empty or unknown, updates otherwise
        db_entity = self.session.merge(entity)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise

        self.session.refresh(db_entity)  # fills the generated id
        return db_entity

    def delete_by_id(self, entity_id: int) -> None:
        db_entity = self.find_by_id(entity_id)
        if db_entity is None:
            raise NotFoundError(self.model.__name__, entity_id)

        self.session.delete(db_entity)
        try:
            self.session.commit()
        except IntegrityError:
            # still referenced from citas
            self.session.rollback()
            raise
