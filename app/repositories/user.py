from typing import Optional
from sqlalchemy.orm import Session
from app.repositories.base import BaseRepository
from app.models.user import User, UserRole

class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def count_by_role(self, db: Session, role: UserRole) -> int:
        return db.query(User).filter(User.role == UserRole(role)).count()

# Initialize repository instance
user_repository = UserRepository()
