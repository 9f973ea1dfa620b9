from typing import Optional
from sqlalchemy.orm import Session
from app.repositories.base import BaseRepository
from app.models.academic import Classroom, ClassroomType

class ClassroomRepository(BaseRepository[Classroom]):
    def __init__(self):
        super().__init__(Classroom)

    def get_by_room_number(self, db: Session, room_number: str) -> Optional[Classroom]:
        return db.query(Classroom).filter(Classroom.room_number == room_number).first()

    def count_by_type(self, db: Session, classroom_type: ClassroomType) -> int:
        return db.query(Classroom).filter(Classroom.type == ClassroomType(classroom_type)).count()

classroom_repository = ClassroomRepository()
