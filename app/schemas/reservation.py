# app/schemas/reservation.py
from pydantic import BaseModel, Field
from typing import Optional
import datetime
from app.models.reservation import ReservationStatus

class ReservationBase(BaseModel):
    date: datetime.date
    start_time: Optional[str] = Field(None, pattern=r'^\d{2}:\d{2}$')
    end_time: Optional[str] = Field(None, pattern=r'^\d{2}:\d{2}$')
    purpose: Optional[str] = None

class ReservationResponse(ReservationBase):
    id: str
    status: ReservationStatus
    user_id: int
    classroom_id: Optional[str] = None
    created_at: datetime.datetime

    model_config = {
        "from_attributes": True
    }