from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from app.db.database import get_db
from app.schemas.user import INT_MAX, User, UserCreate, UserUpdate
from app.crud.user import user as user_crud
from app.core.errors import USER_NOT_FOUND

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_user_or_404(db: AsyncSession, user_id: int):
    db_user = await user_crud.get(db, id=user_id)
    if not db_user:
        logger.warning(f"User {user_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return db_user


@router.get("/users", response_model=List[User])
async def get_users(
    start: int = Query(0, ge=0, le=INT_MAX, description="Number of users to skip"),
    count: Optional[int] = Query(None, ge=1, le=INT_MAX, description="Maximum number of users to return"),
    db: AsyncSession = Depends(get_db)
):
    """
    List users ordered by id.

    - **start**: Number of users to skip
    - **count**: Maximum number of users to return; all users when omitted

    Returns an empty array when the table is empty.
    """
    return await user_crud.get_multi(db, skip=start, limit=count)


@router.post("/user", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a new user. The id is assigned by the database.

    **Request Body Example:**
    ```json
    {
        "name": "test user",
        "age": 30
    }
    ```
    """
    db_user = await user_crud.create(db, obj_in=user_in)
    logger.info(f"Created user {db_user.id}")
    return db_user


@router.get("/user/{user_id}", response_model=User)
async def get_user(
    user_id: int = Path(..., ge=1, le=INT_MAX, description="User id"),
    db: AsyncSession = Depends(get_db)
):
    """Get a single user by id."""
    return await get_user_or_404(db, user_id)


@router.put("/user/{user_id}", response_model=User)
async def update_user(
    user_in: UserUpdate,
    user_id: int = Path(..., ge=1, le=INT_MAX, description="User id"),
    db: AsyncSession = Depends(get_db)
):
    """Replace the name and age of a user. The id is unchanged."""
    db_user = await get_user_or_404(db, user_id)
    updated_user = await user_crud.update(db, db_obj=db_user, obj_in=user_in)
    logger.info(f"Updated user {user_id}")
    return updated_user


@router.delete("/user/{user_id}")
async def delete_user(
    user_id: int = Path(..., ge=1, le=INT_MAX, description="User id"),
    db: AsyncSession = Depends(get_db)
):
    """Delete a user."""
    await get_user_or_404(db, user_id)
    await user_crud.remove(db, id=user_id)
    logger.info(f"Deleted user {user_id}")
    return {"result": "success"}
