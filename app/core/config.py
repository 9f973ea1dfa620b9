from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Campus Room Booking"
    VERSION: str = "1.0.0"

    # Database
    DATABASE_URL: str = "sqlite:///./campus_room.db"
    SQL_ECHO: bool = False

    # Reports
    REPORT_TOP_LIMIT: int = Field(5, ge=1, le=100)
    RECENT_RESERVATIONS_LIMIT: int = Field(10, ge=1, le=100)

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
