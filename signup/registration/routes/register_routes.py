# signup/registration/routes/register_routes.py
from fastapi import APIRouter, Depends, HTTPException, status

from signup.core.config import settings
from signup.dependencies.registration import get_registration_service
from signup.registration.records import RegistrationStatus
from signup.registration.schemas.register_schemas import (
    FieldErrorDetail,
    RegisterRequest,
    RegisterResponse,
)
from signup.registration.services.register_services import RegistrationService

# Router with versioned prefix and tag
router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user account",
)
async def register_endpoint(
    payload: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
):
    if not settings.ALLOW_REGISTRATION:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Registration is disabled."
        )

    result = await service.register_user(payload.to_payload())

    if result.status is RegistrationStatus.VALIDATION_ERROR:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=FieldErrorDetail(field=result.field, message=result.message).model_dump(),
        )
    if result.status is RegistrationStatus.INTERNAL_ERROR:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed"
        )

    return RegisterResponse(
        data={
            "message": "Registration successful",
            "user": result.record.as_dict(include_password=False),
        }
    )
