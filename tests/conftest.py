# tests/conftest.py
import pytest
from datetime import date, datetime, timedelta
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base, User, UserRole, Classroom, ClassroomType, Reservation, ReservationStatus

@pytest.fixture
def mock_db_session():
    """Mocked DB session for service tests"""
    session = MagicMock(spec=Session)
    session.query.return_value.filter.return_value = session.query.return_value
    session.query.return_value.join.return_value = session.query.return_value
    session.query.return_value.order_by.return_value = session.query.return_value
    return session

@pytest.fixture
def db():
    """Real session on an in-memory SQLite database with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()

@pytest.fixture
def seed(db):
    """
    Users 42 (student), 7 (professor), 3 (admin); rooms A101 and S1 (study room).
    r1 PENDING/42, r2 APPROVED/42, r3 APPROVED/7 as in the reference scenario,
    plus a few extra rows for date, room and report queries.
    """
    today = date.today()
    base_time = datetime(2025, 1, 1, 8, 0, 0)

    student = User(id=42, email="student@campus.edu", first_name="Sam", last_name="Student", role=UserRole.STUDENT)
    professor = User(id=7, email="prof@campus.edu", first_name="Paula", last_name="Prof", role=UserRole.PROFESSOR)
    admin = User(id=3, email="admin@campus.edu", first_name="Ada", last_name="Admin", role=UserRole.ADMIN)

    a101 = Classroom(id="room-a101", room_number="A101", type=ClassroomType.CLASSROOM, capacity=40)
    s1 = Classroom(id="room-s1", room_number="S1", type=ClassroomType.STUDY_ROOM, capacity=6)

    reservations = {
        "r1": Reservation(id="r1", date=today + timedelta(days=3), status=ReservationStatus.PENDING,
                          user_id=42, classroom_id="room-a101", created_at=base_time),
        "r2": Reservation(id="r2", date=today + timedelta(days=3), status=ReservationStatus.APPROVED,
                          user_id=42, classroom_id="room-a101", created_at=base_time + timedelta(hours=1)),
        "r3": Reservation(id="r3", date=today + timedelta(days=5), status=ReservationStatus.APPROVED,
                          user_id=7, classroom_id="room-s1", created_at=base_time + timedelta(hours=2)),
        "r4": Reservation(id="r4", date=today - timedelta(days=30), status=ReservationStatus.APPROVED,
                          user_id=7, classroom_id="room-a101", created_at=base_time + timedelta(hours=3)),
        "r5": Reservation(id="r5", date=today + timedelta(days=3), status=ReservationStatus.CANCELLED,
                          user_id=3, classroom_id=None, created_at=base_time + timedelta(hours=4)),
        "r6": Reservation(id="r6", date=date(2025, 3, 10), status=ReservationStatus.REJECTED,
                          user_id=7, classroom_id="room-a101", created_at=base_time + timedelta(hours=5)),
    }

    db.add_all([student, professor, admin, a101, s1])
    db.add_all(reservations.values())
    db.commit()

    return {
        "today": today,
        "student": student,
        "professor": professor,
        "admin": admin,
        "a101": a101,
        "s1": s1,
        **reservations,
    }
