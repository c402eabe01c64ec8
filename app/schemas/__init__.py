from .user import User, UserCreate, UserUpdate

__all__ = ["User", "UserCreate", "UserUpdate"]
