from .user import UserCRUD, user

__all__ = ["UserCRUD", "user"]
