from .task import Task
from .user import Role, User

# Export all models for easy importing
__all__ = ["Task", "User", "Role"]
