# app/repositories/reservation.py
from datetime import date
from typing import Any, Iterable, List, Optional, Union
from sqlalchemy import extract, func
from sqlalchemy.orm import Session

from app.models.academic import Classroom
from app.models.reservation import Reservation, ReservationStatus
from app.models.user import User, UserRole
from app.repositories.base import BaseRepository
from app.schemas.common import PageParams

StatusLike = Union[ReservationStatus, str]
RoleLike = Union[UserRole, str]


def _statuses(statuses: Iterable[StatusLike]) -> List[ReservationStatus]:
    return [ReservationStatus(s) for s in statuses]


class ReservationRepository(BaseRepository[Reservation]):
    """
    Read side of the reservation table.

    Status and role arguments accept the enum member or its string value
    ("APPROVED"). Nothing here catches SQLAlchemy errors; they reach the caller
    unchanged. Results are unordered unless the method name says otherwise.
    """

    def __init__(self):
        super().__init__(Reservation)

    # --- Status ---

    def find_by_status(self, db: Session, status: StatusLike) -> List[Reservation]:
        return db.query(Reservation).filter(Reservation.status == ReservationStatus(status)).all()

    def count_by_status(self, db: Session, status: StatusLike) -> int:
        return db.query(Reservation).filter(Reservation.status == ReservationStatus(status)).count()

    def find_by_status_in(self, db: Session, statuses: Iterable[StatusLike]) -> List[Reservation]:
        return db.query(Reservation).filter(Reservation.status.in_(_statuses(statuses))).all()

    # --- Classroom ---

    def find_by_classroom(self, db: Session, classroom: Classroom) -> List[Reservation]:
        return db.query(Reservation).filter(Reservation.classroom_id == classroom.id).all()

    def find_by_classroom_and_date(self, db: Session, classroom: Classroom, day: date) -> List[Reservation]:
        return (
            db.query(Reservation)
            .filter(Reservation.classroom_id == classroom.id, Reservation.date == day)
            .all()
        )

    def find_by_classroom_and_date_and_status_in(
        self, db: Session, classroom: Classroom, day: date, statuses: Iterable[StatusLike]
    ) -> List[Reservation]:
        return self.find_by_classroom_id_and_date_and_status_in(db, classroom.id, day, statuses)

    def find_by_classroom_id_and_date_and_status_in(
        self, db: Session, classroom_id: str, day: date, statuses: Iterable[StatusLike]
    ) -> List[Reservation]:
        return (
            db.query(Reservation)
            .filter(
                Reservation.classroom_id == classroom_id,
                Reservation.date == day,
                Reservation.status.in_(_statuses(statuses)),
            )
            .all()
        )

    # --- User ---

    def find_by_user(self, db: Session, user: User) -> List[Reservation]:
        return self.find_by_user_id(db, user.id)

    def find_by_user_id(self, db: Session, user_id: int) -> List[Reservation]:
        return db.query(Reservation).filter(Reservation.user_id == user_id).all()

    def count_by_user_id(self, db: Session, user_id: int) -> int:
        return db.query(Reservation).filter(Reservation.user_id == user_id).count()

    def count_by_user_id_and_status(self, db: Session, user_id: int, status: StatusLike) -> int:
        return db.query(Reservation).filter(
            Reservation.user_id == user_id,
            Reservation.status == ReservationStatus(status),
        ).count()

    def count_upcoming_by_user_id(self, db: Session, user_id: int) -> int:
        """Approved reservations dated today or later, using the database's current date."""
        return db.query(Reservation).filter(
            Reservation.user_id == user_id,
            Reservation.date >= func.current_date(),
            Reservation.status == ReservationStatus.APPROVED,
        ).count()

    def find_by_user_id_and_date_between_and_status(
        self, db: Session, user_id: int, start_date: date, end_date: date, status: StatusLike
    ) -> List[Reservation]:
        return (
            db.query(Reservation)
            .filter(
                Reservation.user_id == user_id,
                Reservation.date.between(start_date, end_date),
                Reservation.status == ReservationStatus(status),
            )
            .all()
        )

    def find_by_user_and_date_between_and_status_in(
        self, db: Session, user: User, week_start: date, week_end: date, statuses: Iterable[StatusLike]
    ) -> List[Reservation]:
        return (
            db.query(Reservation)
            .filter(
                Reservation.user_id == user.id,
                Reservation.date.between(week_start, week_end),
                Reservation.status.in_(_statuses(statuses)),
            )
            .all()
        )

    # --- Date ---

    def find_by_date_and_status(self, db: Session, day: date, status: StatusLike) -> List[Reservation]:
        return db.query(Reservation).filter(
            Reservation.date == day,
            Reservation.status == ReservationStatus(status),
        ).all()

    def find_by_date_and_status_not(self, db: Session, day: date, status_to_exclude: StatusLike) -> List[Reservation]:
        return db.query(Reservation).filter(
            Reservation.date == day,
            Reservation.status != ReservationStatus(status_to_exclude),
        ).all()

    # --- Recent ---

    def find_top_by_status_order_by_created_at_desc(
        self, db: Session, status: StatusLike, page: Optional[PageParams] = None
    ) -> List[Reservation]:
        if page is None:
            page = PageParams.top(10)
        return (
            db.query(Reservation)
            .filter(Reservation.status == ReservationStatus(status))
            .order_by(Reservation.created_at.desc())
            .offset(page.skip)
            .limit(page.limit)
            .all()
        )

    def find_top10_by_order_by_created_at_desc(self, db: Session) -> List[Reservation]:
        return self.find_recent(db, PageParams.top(10))

    def find_recent(self, db: Session, page: Optional[PageParams] = None) -> List[Reservation]:
        """Latest reservations of any status, newest first."""
        if page is None:
            page = PageParams.top(10)
        return (
            db.query(Reservation)
            .order_by(Reservation.created_at.desc())
            .offset(page.skip)
            .limit(page.limit)
            .all()
        )

    # --- Reports ---

    def count_by_user_role_and_status(self, db: Session, role: RoleLike, status: StatusLike) -> int:
        return (
            db.query(Reservation)
            .join(Reservation.user)
            .filter(User.role == UserRole(role), Reservation.status == ReservationStatus(status))
            .count()
        )

    def find_popular_classrooms(self, db: Session, page: Optional[PageParams] = None) -> List[Any]:
        """Rows of (room_number, reservation_count), most booked first."""
        if page is None:
            page = PageParams.top(5)
        reservation_count = func.count(Reservation.id).label("reservation_count")
        return (
            db.query(Classroom.room_number.label("room_number"), reservation_count)
            .select_from(Reservation)
            .join(Reservation.classroom)
            .group_by(Classroom.room_number)
            .order_by(reservation_count.desc(), Classroom.room_number)
            .offset(page.skip)
            .limit(page.limit)
            .all()
        )

    def find_most_active_users(self, db: Session, page: Optional[PageParams] = None) -> List[Any]:
        """Rows of (user_id, reservation_count), most active first."""
        if page is None:
            page = PageParams.top(5)
        reservation_count = func.count(Reservation.id).label("reservation_count")
        return (
            db.query(Reservation.user_id.label("user_id"), reservation_count)
            .group_by(Reservation.user_id)
            .order_by(reservation_count.desc(), Reservation.user_id)
            .offset(page.skip)
            .limit(page.limit)
            .all()
        )

    def count_reservations_by_month_and_role(self, db: Session, role: RoleLike) -> List[Any]:
        """Rows of (month, reservation_count) with month in 1..12, across all years."""
        month = extract("month", Reservation.date).label("month")
        reservation_count = func.count(Reservation.id).label("reservation_count")
        return (
            db.query(month, reservation_count)
            .select_from(Reservation)
            .join(Reservation.user)
            .filter(User.role == UserRole(role))
            .group_by(month)
            .order_by(month)
            .all()
        )

    def count_by_classroom_and_role(self, db: Session) -> List[Any]:
        """Rows of (room_number, role, reservation_count)."""
        reservation_count = func.count(Reservation.id).label("reservation_count")
        return (
            db.query(Classroom.room_number.label("room_number"), User.role.label("role"), reservation_count)
            .select_from(Reservation)
            .join(Reservation.classroom)
            .join(Reservation.user)
            .group_by(Classroom.room_number, User.role)
            .all()
        )


reservation_repository = ReservationRepository()
