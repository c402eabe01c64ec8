from pydantic import BaseModel, Field, validator

# Bounds of the INT columns in the users table
INT_MIN = -2147483648
INT_MAX = 2147483647


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="User name")
    age: int = Field(..., strict=True, ge=INT_MIN, le=INT_MAX, description="User age")

    @validator('name')
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name must not be blank')
        return v


class UserCreate(UserBase):
    pass


class UserUpdate(UserBase):
    """PUT replaces both name and age; the id is never taken from the body"""
    pass


class User(UserBase):
    id: int

    class Config:
        from_attributes = True
