"""Trades API routes - trading engine entry points."""

import logging

from fastapi import APIRouter, status

from opinion_trading.application.trading.commands import (
    CancelTradeCommand,
    CreateTradeCommand,
    SettleTradesCommand,
)
from opinion_trading.application.trading.queries import (
    GetEventTradeSummaryQuery,
    GetTradeQuery,
    ListEventTradesQuery,
    ListTradesQuery,
    ListUserTradesQuery,
)
from opinion_trading.presentation.api.authorization import AccessPolicy, enforce
from opinion_trading.presentation.api.dependencies import (
    AdminPrincipal,
    CancelTradeHandlerDep,
    CreateTradeHandlerDep,
    CurrentPrincipal,
    GetEventTradeSummaryHandlerDep,
    GetTradeHandlerDep,
    ListEventTradesHandlerDep,
    ListTradesHandlerDep,
    ListUserTradesHandlerDep,
    SettleTradesHandlerDep,
)
from opinion_trading.presentation.api.v1.schemas import (
    CreateTradeRequest,
    ErrorResponse,
    EventTradeSummaryResponse,
    SettleRequest,
    SettleTradesResponse,
    TradeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trades", tags=["Trades"])


@router.get("", response_model=list[TradeResponse], summary="List all trades (admin)")
async def list_trades(principal: AdminPrincipal, handler: ListTradesHandlerDep) -> list[TradeResponse]:
    trades = await handler.handle(ListTradesQuery())
    return [TradeResponse.model_validate(t) for t in trades]


@router.get(
    "/user/{user_id}",
    response_model=list[TradeResponse],
    summary="List user's trades",
    responses={403: {"model": ErrorResponse, "description": "Not owner"}},
)
async def list_user_trades(
    user_id: int,
    principal: CurrentPrincipal,
    handler: ListUserTradesHandlerDep,
) -> list[TradeResponse]:
    enforce(principal, AccessPolicy.OWNER_OR_ADMIN, owner_id=user_id)
    trades = await handler.handle(ListUserTradesQuery(user_id=user_id))
    return [TradeResponse.model_validate(t) for t in trades]


@router.get(
    "/event/{event_id}",
    response_model=list[TradeResponse] | EventTradeSummaryResponse,
    summary="Event trades (admin) or aggregated summary (others)",
)
async def list_event_trades(
    event_id: int,
    principal: CurrentPrincipal,
    list_handler: ListEventTradesHandlerDep,
    summary_handler: GetEventTradeSummaryHandlerDep,
) -> list[TradeResponse] | EventTradeSummaryResponse:
    if principal.is_admin:
        trades = await list_handler.handle(ListEventTradesQuery(event_id=event_id))
        return [TradeResponse.model_validate(t) for t in trades]

    summary = await summary_handler.handle(GetEventTradeSummaryQuery(event_id=event_id))
    return EventTradeSummaryResponse.model_validate(summary)


@router.get(
    "/{trade_id}",
    response_model=TradeResponse,
    summary="Get trade",
    responses={
        403: {"model": ErrorResponse, "description": "Not owner"},
        404: {"model": ErrorResponse, "description": "Trade not found"},
    },
)
async def get_trade(
    trade_id: int,
    principal: CurrentPrincipal,
    handler: GetTradeHandlerDep,
) -> TradeResponse:
    trade = await handler.handle(GetTradeQuery(trade_id=trade_id))
    enforce(principal, AccessPolicy.OWNER_OR_ADMIN, owner_id=trade.user_id)
    return TradeResponse.model_validate(trade)


@router.post(
    "",
    response_model=TradeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place trade",
    description="""
    Stake balance on an option of a live event.

    **Returns**:
    - 201: Trade executed (balance debited)
    - 400: Invalid amount / insufficient balance
    - 404: Event or option not found
    - 409: Event is not live
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid amount or insufficient balance"},
        404: {"model": ErrorResponse, "description": "Event or option not found"},
        409: {"model": ErrorResponse, "description": "Event is not live"},
    },
)
async def create_trade(
    request: CreateTradeRequest,
    principal: CurrentPrincipal,
    handler: CreateTradeHandlerDep,
) -> TradeResponse:
    trade = await handler.handle(
        CreateTradeCommand(
            user_id=principal.user_id,
            event_id=request.event_id,
            option_id=request.option_id,
            amount=request.amount,
        )
    )
    return TradeResponse.model_validate(trade)


@router.put(
    "/settle/{event_id}",
    response_model=SettleTradesResponse,
    summary="Settle event trades and pay winners (admin)",
    responses={
        404: {"model": ErrorResponse, "description": "Event or option not found"},
        409: {"model": ErrorResponse, "description": "Event cannot be settled"},
    },
)
async def settle_trades(
    event_id: int,
    request: SettleRequest,
    principal: AdminPrincipal,
    handler: SettleTradesHandlerDep,
) -> SettleTradesResponse:
    result = await handler.handle(
        SettleTradesCommand(event_id=event_id, winning_option_id=request.winning_option_id)
    )
    count = result.settled_trades_count
    logger.info(
        "api.settle_trades.success",
        extra={"event_id": event_id, "settled_trades_count": count, "admin_id": principal.user_id},
    )
    return SettleTradesResponse(
        message=f"Successfully settled {count} trades",
        settled_trades_count=count,
    )


@router.put(
    "/{trade_id}/cancel",
    response_model=TradeResponse,
    summary="Cancel trade (refund stake)",
    responses={
        403: {"model": ErrorResponse, "description": "Not owner"},
        404: {"model": ErrorResponse, "description": "Trade not found"},
        409: {"model": ErrorResponse, "description": "Trade is not executed"},
    },
)
async def cancel_trade(
    trade_id: int,
    principal: CurrentPrincipal,
    get_handler: GetTradeHandlerDep,
    cancel_handler: CancelTradeHandlerDep,
) -> TradeResponse:
    existing = await get_handler.handle(GetTradeQuery(trade_id=trade_id))
    enforce(principal, AccessPolicy.OWNER_OR_ADMIN, owner_id=existing.user_id)

    trade = await cancel_handler.handle(CancelTradeCommand(trade_id=trade_id))
    return TradeResponse.model_validate(trade)
