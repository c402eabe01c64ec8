from app.crud.base import CRUDBase
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

class UserCRUD(CRUDBase[User, UserCreate, UserUpdate]):
    pass

user = UserCRUD(User)
