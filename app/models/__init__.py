from .base import Base
from .user import User, UserRole
from .academic import Classroom, ClassroomType
from .reservation import Reservation, ReservationStatus
