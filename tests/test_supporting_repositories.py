import pytest
from pydantic import ValidationError

from app.models import ClassroomType, UserRole
from app.repositories.classroom import classroom_repository
from app.repositories.user import user_repository
from app.schemas.common import PageParams


def test_user_repository_lookups(db, seed):
    assert user_repository.get_by_email(db, "prof@campus.edu").id == 7
    assert user_repository.get_by_email(db, "nobody@campus.edu") is None
    assert user_repository.count(db) == 3
    assert user_repository.count_by_role(db, UserRole.STUDENT) == 1
    assert user_repository.count_by_role(db, "ADMIN") == 1

def test_classroom_repository_lookups(db, seed):
    assert classroom_repository.get_by_room_number(db, "S1").id == "room-s1"
    assert classroom_repository.count_by_type(db, ClassroomType.CLASSROOM) == 1
    assert classroom_repository.count_by_type(db, "STUDY_ROOM") == 1

def test_classroom_gets_generated_string_id(db):
    room = classroom_repository.create(db, {"room_number": "B202", "capacity": 20})
    assert isinstance(room.id, str) and len(room.id) == 36
    assert room.type == ClassroomType.CLASSROOM

def test_get_all_pages(db, seed):
    assert len(user_repository.get_all(db, skip=1, limit=1)) == 1
    assert len(user_repository.get_all(db)) == 3

def test_page_params_bounds():
    assert PageParams.top(10).skip == 0
    assert PageParams().limit == 10
    with pytest.raises(ValidationError):
        PageParams(limit=0)
    with pytest.raises(ValidationError):
        PageParams(skip=-1)
