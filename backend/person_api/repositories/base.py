from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlmodel import Session, SQLModel, select

from person_api.core.errors import EntityNotFoundError

ModelT = TypeVar("ModelT", bound=SQLModel)


class Repository(Generic[ModelT]):
    """
    basic crud over one table model

    subclasses set ``model`` and add their own queries. every write commits
    straight away; nothing here retries or swallows database errors.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        return self.session.get(self.model, entity_id)

    def get_all(self) -> List[ModelT]:
        return list(self.session.exec(select(self.model)).all())

    def add(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def update(self, entity: ModelT) -> ModelT:
        entity_id = getattr(entity, "id", None)
        if entity_id is None or self.session.get(self.model, entity_id) is None:
            raise EntityNotFoundError(self.model.__name__, entity_id)
        merged = self.session.merge(entity)
        self.session.commit()
        self.session.refresh(merged)
        return merged

    def delete(self, entity_id: Any) -> None:
        entity = self.session.get(self.model, entity_id)
        if entity is None:
            raise EntityNotFoundError(self.model.__name__, entity_id)
        self.session.delete(entity)
        self.session.commit()

    def exists(self, entity_id: Any) -> bool:
        return self.session.get(self.model, entity_id) is not None

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(self.model)).one()
