"""Dependency injection for FastAPI.

Provides dependencies для API routes:
- Container (з app.state, створений в create_app)
- Handlers (нова UnitOfWork на кожен request)
- Principal з Authorization: Bearer <jwt>
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from opinion_trading.application.events.handlers import (
    CreateEventHandler,
    DeleteEventHandler,
    FetchExternalEventsHandler,
    GetEventHandler,
    ListEventsByCategoryHandler,
    ListEventsHandler,
    SettleEventHandler,
    UpdateEventHandler,
)
from opinion_trading.application.trading.handlers import (
    CancelTradeHandler,
    CreateTradeHandler,
    GetEventTradeSummaryHandler,
    GetTradeHandler,
    ListEventTradesHandler,
    ListTradesHandler,
    ListUserTradesHandler,
    SettleTradesHandler,
)
from opinion_trading.application.users.handlers import (
    ChangePasswordHandler,
    GetUserHandler,
    LoginUserHandler,
    RegisterUserHandler,
)
from opinion_trading.domain.users import UserRole
from opinion_trading.infrastructure.auth import InvalidTokenError
from opinion_trading.presentation.api.authorization import AccessPolicy, Principal, enforce
from opinion_trading.presentation.api.container import AppContainer


def get_container(request: Request) -> AppContainer:
    """Container attached to app.state at create_app()."""
    return request.app.state.container


ContainerDep = Annotated[AppContainer, Depends(get_container)]


# ============================================================================
# AUTHENTICATION
# ============================================================================


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": "Unauthorized", "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_principal(
    container: ContainerDep,
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    """Resolve Principal from `Authorization: Bearer <token>`.

    Raises:
        HTTPException: 401 if header missing or token invalid.
    """
    if authorization is None:
        raise _unauthorized("Missing authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise _unauthorized("Invalid authorization format")

    try:
        return principal_from_token(container, token.strip())
    except (InvalidTokenError, ValueError) as e:
        raise _unauthorized("Invalid or expired token") from e


def principal_from_token(container: AppContainer, token: str) -> Principal:
    """Decode JWT у Principal (HTTP header або /ws?token=).

    Raises:
        InvalidTokenError: Підпис / expiry невалідні.
        ValueError: Некоректні sub / role claims.
    """
    payload = container.jwt_manager.decode(token)
    return Principal(user_id=int(payload["sub"]), role=UserRole(payload.get("role", "user")))


CurrentPrincipal = Annotated[Principal, Depends(get_principal)]


async def require_admin(principal: CurrentPrincipal) -> Principal:
    enforce(principal, AccessPolicy.ADMIN_ONLY)
    return principal


AdminPrincipal = Annotated[Principal, Depends(require_admin)]


# ============================================================================
# USERS
# ============================================================================


def get_register_user_handler(container: ContainerDep) -> RegisterUserHandler:
    return RegisterUserHandler(
        uow=container.unit_of_work(),
        password_hasher=container.password_hasher,
        token_issuer=container.jwt_manager,
        starting_balance=container.settings.starting_balance,
    )


def get_login_user_handler(container: ContainerDep) -> LoginUserHandler:
    return LoginUserHandler(
        uow=container.unit_of_work(),
        password_hasher=container.password_hasher,
        token_issuer=container.jwt_manager,
    )


def get_change_password_handler(container: ContainerDep) -> ChangePasswordHandler:
    return ChangePasswordHandler(uow=container.unit_of_work(), password_hasher=container.password_hasher)


def get_user_handler(container: ContainerDep) -> GetUserHandler:
    return GetUserHandler(uow=container.unit_of_work())


RegisterUserHandlerDep = Annotated[RegisterUserHandler, Depends(get_register_user_handler)]
LoginUserHandlerDep = Annotated[LoginUserHandler, Depends(get_login_user_handler)]
ChangePasswordHandlerDep = Annotated[ChangePasswordHandler, Depends(get_change_password_handler)]
GetUserHandlerDep = Annotated[GetUserHandler, Depends(get_user_handler)]


# ============================================================================
# EVENTS
# ============================================================================


def get_create_event_handler(container: ContainerDep) -> CreateEventHandler:
    return CreateEventHandler(uow=container.unit_of_work(), event_bus=container.event_bus)


def get_update_event_handler(container: ContainerDep) -> UpdateEventHandler:
    return UpdateEventHandler(uow=container.unit_of_work(), event_bus=container.event_bus)


def get_delete_event_handler(container: ContainerDep) -> DeleteEventHandler:
    return DeleteEventHandler(uow=container.unit_of_work(), event_bus=container.event_bus)


def get_settle_event_handler(container: ContainerDep) -> SettleEventHandler:
    return SettleEventHandler(
        uow=container.unit_of_work(),
        event_bus=container.event_bus,
        settlement_locks=container.settlement_locks,
    )


def get_fetch_external_events_handler(container: ContainerDep) -> FetchExternalEventsHandler:
    return FetchExternalEventsHandler(
        uow=container.unit_of_work(),
        event_bus=container.event_bus,
        feed=container.feed,
    )


def get_event_handler(container: ContainerDep) -> GetEventHandler:
    return GetEventHandler(uow=container.unit_of_work())


def get_list_events_handler(container: ContainerDep) -> ListEventsHandler:
    return ListEventsHandler(uow=container.unit_of_work())


def get_list_events_by_category_handler(container: ContainerDep) -> ListEventsByCategoryHandler:
    return ListEventsByCategoryHandler(uow=container.unit_of_work())


CreateEventHandlerDep = Annotated[CreateEventHandler, Depends(get_create_event_handler)]
UpdateEventHandlerDep = Annotated[UpdateEventHandler, Depends(get_update_event_handler)]
DeleteEventHandlerDep = Annotated[DeleteEventHandler, Depends(get_delete_event_handler)]
SettleEventHandlerDep = Annotated[SettleEventHandler, Depends(get_settle_event_handler)]
FetchExternalEventsHandlerDep = Annotated[
    FetchExternalEventsHandler, Depends(get_fetch_external_events_handler)
]
GetEventHandlerDep = Annotated[GetEventHandler, Depends(get_event_handler)]
ListEventsHandlerDep = Annotated[ListEventsHandler, Depends(get_list_events_handler)]
ListEventsByCategoryHandlerDep = Annotated[
    ListEventsByCategoryHandler, Depends(get_list_events_by_category_handler)
]


# ============================================================================
# TRADES
# ============================================================================


def get_create_trade_handler(container: ContainerDep) -> CreateTradeHandler:
    return CreateTradeHandler(uow=container.unit_of_work(), event_bus=container.event_bus)


def get_cancel_trade_handler(container: ContainerDep) -> CancelTradeHandler:
    return CancelTradeHandler(uow=container.unit_of_work(), event_bus=container.event_bus)


def get_settle_trades_handler(container: ContainerDep) -> SettleTradesHandler:
    return SettleTradesHandler(
        uow=container.unit_of_work(),
        event_bus=container.event_bus,
        settlement_locks=container.settlement_locks,
    )


def get_trade_handler(container: ContainerDep) -> GetTradeHandler:
    return GetTradeHandler(uow=container.unit_of_work())


def get_list_trades_handler(container: ContainerDep) -> ListTradesHandler:
    return ListTradesHandler(uow=container.unit_of_work())


def get_list_user_trades_handler(container: ContainerDep) -> ListUserTradesHandler:
    return ListUserTradesHandler(uow=container.unit_of_work())


def get_list_event_trades_handler(container: ContainerDep) -> ListEventTradesHandler:
    return ListEventTradesHandler(uow=container.unit_of_work())


def get_event_trade_summary_handler(container: ContainerDep) -> GetEventTradeSummaryHandler:
    return GetEventTradeSummaryHandler(uow=container.unit_of_work())


CreateTradeHandlerDep = Annotated[CreateTradeHandler, Depends(get_create_trade_handler)]
CancelTradeHandlerDep = Annotated[CancelTradeHandler, Depends(get_cancel_trade_handler)]
SettleTradesHandlerDep = Annotated[SettleTradesHandler, Depends(get_settle_trades_handler)]
GetTradeHandlerDep = Annotated[GetTradeHandler, Depends(get_trade_handler)]
ListTradesHandlerDep = Annotated[ListTradesHandler, Depends(get_list_trades_handler)]
ListUserTradesHandlerDep = Annotated[ListUserTradesHandler, Depends(get_list_user_trades_handler)]
ListEventTradesHandlerDep = Annotated[ListEventTradesHandler, Depends(get_list_event_trades_handler)]
GetEventTradeSummaryHandlerDep = Annotated[
    GetEventTradeSummaryHandler, Depends(get_event_trade_summary_handler)
]
