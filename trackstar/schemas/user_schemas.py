from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from trackstar.schemas.common import CamelModel

Provider = Literal["github", "google"]


class UserRegister(CamelModel):
    provider_id: str = Field(..., min_length=1, description="Provider's user ID")
    provider: Provider = Field(..., description="OAuth provider")
    name: str = Field(..., min_length=1, max_length=200, description="User's full name")
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", description="User's email address")
    username: Optional[str] = Field(None, max_length=50)
    avatar: Optional[str] = Field(None, description="URL to user's avatar")


class UserUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    username: Optional[str] = Field(None, max_length=50)
    timezone: Optional[str] = Field(None, max_length=64)


class UserOut(CamelModel):
    id: str
    name: str
    email: str
    username: Optional[str] = None
    avatar: Optional[str] = None
    timezone: Optional[str] = None
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
