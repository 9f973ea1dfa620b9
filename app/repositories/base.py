from typing import Any, Generic, Type, TypeVar, List, Optional
from sqlalchemy.orm import Session
import logging

T = TypeVar("T")

logger = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[T]:
        return db.get(self.model, id)

    def get_all(self, db: Session, skip: int = 0, limit: int = 100) -> List[T]:
        return db.query(self.model).offset(skip).limit(limit).all()

    def count(self, db: Session) -> int:
        return db.query(self.model).count()

    def create(self, db: Session, obj_in: dict) -> T:
        try:
            db_obj = self.model(**obj_in)
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
            return db_obj
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise

    def update(self, db: Session, db_obj: T, obj_in: dict) -> T:
        try:
            for field, value in obj_in.items():
                setattr(db_obj, field, value)
            db.commit()
            db.refresh(db_obj)
            return db_obj
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating {self.model.__name__}: {e}")
            raise

    def delete(self, db: Session, id: Any) -> None:
        obj = db.get(self.model, id)
        if obj:
            try:
                db.delete(obj)
                db.commit()
            except Exception as e:
                db.rollback()
                logger.error(f"Error deleting {self.model.__name__} with id {id}: {e}")
                raise
