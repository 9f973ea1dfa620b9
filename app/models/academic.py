from sqlalchemy import Column, String, Integer, Enum
from sqlalchemy.orm import relationship
from app.models.base import BaseModel
import enum
import uuid

class ClassroomType(enum.Enum):
    CLASSROOM = "CLASSROOM"
    STUDY_ROOM = "STUDY_ROOM"

class Classroom(BaseModel):
    __tablename__ = "classrooms"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    room_number = Column(String(50), nullable=False, unique=True, index=True)
    type = Column(Enum(ClassroomType, values_callable=lambda obj: [e.value for e in obj],
        native_enum=False, name='classroom_type'), default=ClassroomType.CLASSROOM, nullable=False)
    capacity = Column(Integer, nullable=False, default=30)
    building = Column(String(100))

    reservations = relationship("Reservation", back_populates="classroom")
