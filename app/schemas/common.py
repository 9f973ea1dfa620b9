from pydantic import BaseModel, Field

class PageParams(BaseModel):
    """Bound for "top N" style queries."""
    skip: int = Field(0, ge=0, description="Number of records to skip")
    limit: int = Field(10, ge=1, le=100, description="Number of records to return")

    @classmethod
    def top(cls, n: int) -> "PageParams":
        return cls(skip=0, limit=n)
