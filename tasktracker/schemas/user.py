from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, EmailStr, Field, StringConstraints, TypeAdapter, ValidationError, field_validator

# stripped before the length bounds are checked
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(value: str) -> str:
    """Return the address in the form signup stores it, or ``value`` unchanged if it is not one."""
    try:
        return _email_adapter.validate_python(value)
    except ValidationError:
        return value


class UserCreate(BaseModel):
    """Body of /signup and /updateuser/{id} (update is a full overwrite)."""

    first_name: Name
    last_name: Name
    email: EmailStr
    password: str = Field(min_length=6, max_length=255)

    @field_validator("email")
    @classmethod
    def email_length(cls, v: str) -> str:
        if not 6 <= len(v) <= 255:
            raise ValueError("email must be between 6 and 255 characters")
        return v

    @field_validator("password")
    @classmethod
    def password_max_bytes(cls, v: str) -> str:
        """Ensure password does not exceed bcrypt's 72-byte limit when UTF-8 encoded."""
        if len(v.encode("utf-8")) > 72:
            raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
        return v


class UserLogin(BaseModel):
    # no length rules here: a bad password or address is just a failed login
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def same_form_as_signup(cls, v: str) -> str:
        return normalize_email(v)


class UserOut(BaseModel):
    user_id: str = Field(validation_alias="id")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime
