"""Authentication Routes.

Register / login (JWT access token), password change, current profile.
"""

import logging

from fastapi import APIRouter, status

from opinion_trading.application.users.commands import (
    ChangePasswordCommand,
    LoginUserCommand,
    RegisterUserCommand,
)
from opinion_trading.application.users.queries import GetUserQuery
from opinion_trading.presentation.api.dependencies import (
    ChangePasswordHandlerDep,
    CurrentPrincipal,
    GetUserHandlerDep,
    LoginUserHandlerDep,
    RegisterUserHandlerDep,
)
from opinion_trading.presentation.api.v1.schemas import (
    AuthResponse,
    ChangePasswordRequest,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Creates a user with the starting balance and returns an access token.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email or username taken"},
    },
)
async def register(request: RegisterRequest, handler: RegisterUserHandlerDep) -> AuthResponse:
    result = await handler.handle(
        RegisterUserCommand(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )
    logger.info("api.register.success", extra={"user_id": result.user.id})
    return AuthResponse.model_validate(result)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login",
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
async def login(request: LoginRequest, handler: LoginUserHandlerDep) -> AuthResponse:
    result = await handler.handle(LoginUserCommand(email=request.email, password=request.password))
    return AuthResponse.model_validate(result)


@router.post(
    "/change-password",
    response_model=MessageResponse,
    summary="Change password",
    responses={
        401: {"model": ErrorResponse, "description": "Current password is incorrect"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    principal: CurrentPrincipal,
    handler: ChangePasswordHandlerDep,
) -> MessageResponse:
    await handler.handle(
        ChangePasswordCommand(
            user_id=principal.user_id,
            old_password=request.old_password,
            new_password=request.new_password,
        )
    )
    return MessageResponse(message="Password changed successfully")


@router.get("/me", response_model=UserResponse, summary="Current user profile")
async def me(principal: CurrentPrincipal, handler: GetUserHandlerDep) -> UserResponse:
    user = await handler.handle(GetUserQuery(user_id=principal.user_id))
    return UserResponse.model_validate(user)
