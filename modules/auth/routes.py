"""
Authentication endpoints.

POST /login issues a bearer credential; POST /check reports whether a
credential is still valid.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from shared.exceptions import AuthenticationError, ValidationError
from shared.models import ApiResponse

from .interfaces import IAuthService
from .models import LoginRequest, TokenCheckRequest

router = APIRouter()


@router.post("/login", response_model=ApiResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> ApiResponse:
    """
    Exchange email and password for a bearer credential.

    The credential is returned as a string in `data` and expires after one hour.
    """
    token = await service.login(request.email, request.password)
    return ApiResponse.ok("Valid email and password", token)


@router.post("/check", response_model=ApiResponse)
async def check_token(
    request: TokenCheckRequest,
    service: IAuthService = Depends(get_auth_service),
) -> ApiResponse:
    """
    Check a credential supplied in the body.

    Failures are reported as 400 rather than 401, since the caller is
    asking about a token rather than presenting one.
    """
    if not request.token:
        raise ValidationError("Token not found", code="MISSING_TOKEN")

    try:
        await service.validate_token(request.token)
    except AuthenticationError:
        raise ValidationError("Token not valid", code="INVALID_TOKEN")

    return ApiResponse.ok("Token is valid")
