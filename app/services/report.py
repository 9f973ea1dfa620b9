# app/services/report.py
from sqlalchemy.orm import Session
from typing import Dict, List
import calendar
import csv
import io
import logging

from app.core.config import settings
from app.models.academic import ClassroomType
from app.models.reservation import ReservationStatus
from app.models.user import UserRole
from app.repositories.reservation import reservation_repository
from app.repositories.classroom import classroom_repository
from app.repositories.user import user_repository
from app.schemas.common import PageParams
from app.schemas.report import (
    ReportData, ReportStatistics, UsersByRole,
    PopularRoom, ActiveUser, MonthlyActivity
)
from app.schemas.reservation import ReservationResponse

logger = logging.getLogger(__name__)

# Keys used in role breakdowns, matching the per-role columns of the report
ROLE_KEYS = {
    UserRole.PROFESSOR: "professor",
    UserRole.STUDENT: "student",
    UserRole.ADMIN: "admin",
}
UNKNOWN_ROLE_KEY = "unknown"


def _role_key(role) -> str:
    try:
        return ROLE_KEYS[UserRole(role)]
    except ValueError:
        return UNKNOWN_ROLE_KEY


def _empty_role_data() -> Dict[str, int]:
    return {key: 0 for key in [*ROLE_KEYS.values(), UNKNOWN_ROLE_KEY]}


class ReportService:
    def __init__(self, reservation_repo, classroom_repo, user_repo):
        self.reservation_repo = reservation_repo
        self.classroom_repo = classroom_repo
        self.user_repo = user_repo

    async def get_report(self, db: Session, top_limit: int = None) -> ReportData:
        try:
            top = PageParams.top(top_limit if top_limit is not None else settings.REPORT_TOP_LIMIT)
            recent = self.reservation_repo.find_recent(db, PageParams.top(settings.RECENT_RESERVATIONS_LIMIT))
            report = ReportData(
                statistics=self.get_statistics(db),
                popular_rooms=self.get_popular_rooms(db, top),
                active_users=self.get_active_users(db, top),
                monthly_activity=self.get_monthly_activity(db),
                recent_reservations=[ReservationResponse.model_validate(r) for r in recent],
            )
        except Exception as e:
            logger.error(f"Error building reservation report: {e}")
            raise
        logger.debug(
            "Report built: %d rooms, %d users, %d months",
            len(report.popular_rooms), len(report.active_users), len(report.monthly_activity)
        )
        return report

    def get_statistics(self, db: Session) -> ReportStatistics:
        repo = self.reservation_repo
        return ReportStatistics(
            total_reservations=repo.count(db),
            approved_reservations=repo.count_by_status(db, ReservationStatus.APPROVED),
            pending_reservations=repo.count_by_status(db, ReservationStatus.PENDING),
            rejected_reservations=repo.count_by_status(db, ReservationStatus.REJECTED),
            professor_reservations=repo.count_by_user_role_and_status(
                db, UserRole.PROFESSOR, ReservationStatus.APPROVED),
            student_reservations=repo.count_by_user_role_and_status(
                db, UserRole.STUDENT, ReservationStatus.APPROVED),
            total_classrooms=self.classroom_repo.count_by_type(db, ClassroomType.CLASSROOM),
            total_study_rooms=self.classroom_repo.count_by_type(db, ClassroomType.STUDY_ROOM),
            total_users=self.user_repo.count(db),
            users_by_role=UsersByRole(
                admin_count=self.user_repo.count_by_role(db, UserRole.ADMIN),
                professor_count=self.user_repo.count_by_role(db, UserRole.PROFESSOR),
                student_count=self.user_repo.count_by_role(db, UserRole.STUDENT),
            ),
        )

    def get_popular_rooms(self, db: Session, page: PageParams) -> List[PopularRoom]:
        rows = self.reservation_repo.find_popular_classrooms(db, page)

        # Percentages are shares of every reservation that has a room, not only the top N
        role_rows = self.reservation_repo.count_by_classroom_and_role(db)
        total_with_room = sum(r.reservation_count for r in role_rows)

        role_data: Dict[str, Dict[str, int]] = {}
        for r in role_rows:
            breakdown = role_data.setdefault(r.room_number, _empty_role_data())
            breakdown[_role_key(r.role)] += r.reservation_count

        return [
            PopularRoom(
                room_number=row.room_number,
                count=row.reservation_count,
                percentage=round(row.reservation_count * 100.0 / total_with_room, 1) if total_with_room else 0.0,
                role_data=role_data.get(row.room_number, _empty_role_data()),
            )
            for row in rows
        ]

    def get_active_users(self, db: Session, page: PageParams) -> List[ActiveUser]:
        result = []
        for row in self.reservation_repo.find_most_active_users(db, page):
            user = self.user_repo.get(db, row.user_id)
            if user is None:
                result.append(ActiveUser(user_id=row.user_id, count=row.reservation_count))
                continue
            result.append(ActiveUser(
                user_id=row.user_id,
                user_name=user.full_name or "Unknown User",
                role=user.role.value,
                count=row.reservation_count,
            ))
        return result

    def get_monthly_activity(self, db: Session) -> List[MonthlyActivity]:
        months: Dict[int, Dict[str, int]] = {}
        for role, key in ROLE_KEYS.items():
            for row in self.reservation_repo.count_reservations_by_month_and_role(db, role):
                counts = months.setdefault(int(row.month), {})
                counts[key] = counts.get(key, 0) + row.reservation_count

        return [
            MonthlyActivity(
                month=calendar.month_name[month],
                professor_count=counts.get("professor", 0),
                student_count=counts.get("student", 0),
                admin_count=counts.get("admin", 0),
                total=sum(counts.values()),
            )
            for month, counts in sorted(months.items())
        ]

    async def export_csv(self, db: Session) -> str:
        """Render the report as CSV, one section per table."""
        report = await self.get_report(db)
        buffer = io.StringIO()
        writer = csv.writer(buffer)

        writer.writerow(["Metric", "Value"])
        stats = report.statistics
        writer.writerow(["Total Reservations", stats.total_reservations])
        writer.writerow(["Approved Reservations", stats.approved_reservations])
        writer.writerow(["Pending Reservations", stats.pending_reservations])
        writer.writerow(["Rejected Reservations", stats.rejected_reservations])
        writer.writerow(["Professor Reservations", stats.professor_reservations])
        writer.writerow(["Student Reservations", stats.student_reservations])
        writer.writerow(["Total Classrooms", stats.total_classrooms])
        writer.writerow(["Total Study Rooms", stats.total_study_rooms])
        writer.writerow(["Total Users", stats.total_users])
        writer.writerow(["Admin Users", stats.users_by_role.admin_count])
        writer.writerow(["Professor Users", stats.users_by_role.professor_count])
        writer.writerow(["Student Users", stats.users_by_role.student_count])
        writer.writerow([])

        writer.writerow(["Room", "Reservations", "Usage %", "By Professors", "By Students", "By Admins"])
        for room in report.popular_rooms:
            writer.writerow([
                room.room_number, room.count, f"{room.percentage:.1f}",
                room.role_data.get("professor", 0),
                room.role_data.get("student", 0),
                room.role_data.get("admin", 0),
            ])
        writer.writerow([])

        writer.writerow(["User", "Role", "Reservations"])
        for user in report.active_users:
            writer.writerow([user.user_name, user.role or "Unknown Role", user.count])
        writer.writerow([])

        writer.writerow(["Month", "Professor Reservations", "Student Reservations", "Admin Reservations", "Total"])
        for month in report.monthly_activity:
            writer.writerow([month.month, month.professor_count, month.student_count, month.admin_count, month.total])

        return buffer.getvalue()


report_service = ReportService(
    reservation_repo=reservation_repository,
    classroom_repo=classroom_repository,
    user_repo=user_repository,
)
