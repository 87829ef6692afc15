from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List
import enum

# Single authority value carried by every user
class Role(str, enum.Enum):
    USER = "USER"

class User(SQLModel, table=True):
    """User model for authentication.

    `password` always holds a bcrypt hash, never the plaintext.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, nullable=False)
    password: str = Field(nullable=False)
    role: Role = Field(default=Role.USER)

    # Relationship to tasks
    tasks: List["Task"] = Relationship(back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
