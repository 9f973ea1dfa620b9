from pydantic import BaseModel, Field
from typing import List, Dict, Optional
from app.schemas.reservation import ReservationResponse

class UsersByRole(BaseModel):
    admin_count: int = 0
    professor_count: int = 0
    student_count: int = 0

class ReportStatistics(BaseModel):
    total_reservations: int = 0
    approved_reservations: int = 0
    pending_reservations: int = 0
    rejected_reservations: int = 0
    professor_reservations: int = Field(0, description="Approved reservations made by professors")
    student_reservations: int = Field(0, description="Approved reservations made by students")
    total_classrooms: int = 0
    total_study_rooms: int = 0
    total_users: int = 0
    users_by_role: UsersByRole = Field(default_factory=UsersByRole)

class PopularRoom(BaseModel):
    room_number: str
    count: int
    percentage: float = 0.0
    role_data: Dict[str, int] = Field(default_factory=dict, description="Reservation count per role, e.g. {'professor': 3}")

class ActiveUser(BaseModel):
    user_id: int
    user_name: str = "Unknown User"
    role: Optional[str] = None
    count: int = 0

class MonthlyActivity(BaseModel):
    month: str
    professor_count: int = 0
    student_count: int = 0
    admin_count: int = 0
    total: int = 0

class ReportData(BaseModel):
    statistics: ReportStatistics
    popular_rooms: List[PopularRoom] = Field(default_factory=list)
    active_users: List[ActiveUser] = Field(default_factory=list)
    monthly_activity: List[MonthlyActivity] = Field(default_factory=list)
    recent_reservations: List[ReservationResponse] = Field(default_factory=list)
