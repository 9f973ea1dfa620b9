from sqlalchemy import Column, String, Integer, Date, Text, Enum, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import BaseModel
import enum
import uuid

class ReservationStatus(enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"

class Reservation(BaseModel):
    __tablename__ = "reservations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    date = Column(Date, nullable=False, index=True)
    start_time = Column(String(5))  # HH:MM
    end_time = Column(String(5))
    purpose = Column(Text)
    status = Column(Enum(ReservationStatus, values_callable=lambda obj: [e.value for e in obj],
        native_enum=False, name='reservation_status'), default=ReservationStatus.PENDING, nullable=False, index=True)

    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    classroom_id = Column(String(36), ForeignKey('classrooms.id', ondelete='SET NULL'), nullable=True, index=True)

    user = relationship("User", back_populates="reservations")
    classroom = relationship("Classroom", back_populates="reservations")
