import pytest
from unittest.mock import MagicMock, patch

from app.core import database


def test_get_db_closes_session():
    session = MagicMock()
    with patch.object(database, "SessionLocal", return_value=session):
        gen = database.get_db()
        assert next(gen) is session
        with pytest.raises(StopIteration):
            next(gen)
    session.close.assert_called_once()

def test_db_context_commits_on_success():
    session = MagicMock()
    with patch.object(database, "SessionLocal", return_value=session):
        with database.get_db_context() as db:
            assert db is session
    session.commit.assert_called_once()
    session.rollback.assert_not_called()
    session.close.assert_called_once()

def test_db_context_rolls_back_and_reraises():
    session = MagicMock()
    with patch.object(database, "SessionLocal", return_value=session):
        with pytest.raises(RuntimeError):
            with database.get_db_context():
                raise RuntimeError("boom")
    session.rollback.assert_called_once()
    session.commit.assert_not_called()
    session.close.assert_called_once()

def test_sqlite_engine_enables_foreign_keys():
    engine = database.create_db_engine("sqlite://", echo=False)
    with engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    engine.dispose()
