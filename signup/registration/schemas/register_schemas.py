# signup/registration/schemas/register_schemas.py
from typing import Any, Optional

from pydantic import BaseModel


# ---------------------------
# Request Model
# ---------------------------
class RegisterRequest(BaseModel):
    """
    Incoming payload for POST /api/v1/auth/register

    Fields:
    - username: required, alphanumeric, at least 8 characters
    - email:    required
    - password: required, mixed case + digit + one of @$!%*?&
    - any other key is accepted as an additional profile field
      (firstname, lastname, age, gender, address, number, phoneNumber, ...)

    Presence and format are checked by the registration service, not here,
    so a missing field yields the service's combined error message.
    """
    username: Optional[Any] = None
    email: Optional[Any] = None
    password: Optional[Any] = None

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "username": "testuser1",
                "email": "test@example.com",
                "password": "Testpass1@",
                "age": 25,
                "gender": "female",
            }
        }

    def to_payload(self) -> dict[str, Any]:
        """Identity fields followed by the extra fields in submitted order."""
        payload = {
            "username": self.username,
            "email": self.email,
            "password": self.password,
        }
        payload.update(self.model_extra or {})
        return payload


# ---------------------------
# Response Models
# ---------------------------
class RegisterResponseData(BaseModel):
    """
    Data block returned on successful registration. The password hash is
    never echoed back.
    """
    message: str
    user: dict[str, Any]


class RegisterResponse(BaseModel):
    """
    Full HTTP 201 response body.
    """
    data: RegisterResponseData


class FieldErrorDetail(BaseModel):
    field: str
    message: str
