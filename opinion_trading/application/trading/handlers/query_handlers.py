"""Trading query handlers (read-only)."""

from decimal import Decimal

from opinion_trading.application.shared import QueryHandler, UnitOfWork
from opinion_trading.application.trading.dtos import (
    EventTradeSummaryDTO,
    OptionTradeSummaryDTO,
    TradeDTO,
)
from opinion_trading.application.trading.queries import (
    GetEventTradeSummaryQuery,
    GetTradeQuery,
    ListEventTradesQuery,
    ListTradesQuery,
    ListUserTradesQuery,
)
from opinion_trading.domain.trading import TradeNotFoundError


class GetTradeHandler(QueryHandler[GetTradeQuery, TradeDTO]):
    """Handler для GetTrade query."""

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetTradeQuery) -> TradeDTO:
        """Raises TradeNotFoundError якщо trade не існує."""
        async with self.uow:
            trade = await self.uow.trades.get_by_id(query.trade_id)

        if trade is None:
            raise TradeNotFoundError("Trade not found", trade_id=query.trade_id)
        return TradeDTO.from_entity(trade)


class ListTradesHandler(QueryHandler[ListTradesQuery, list[TradeDTO]]):
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: ListTradesQuery) -> list[TradeDTO]:
        async with self.uow:
            trades = await self.uow.trades.list_all()
        return [TradeDTO.from_entity(t) for t in trades]


class ListUserTradesHandler(QueryHandler[ListUserTradesQuery, list[TradeDTO]]):
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: ListUserTradesQuery) -> list[TradeDTO]:
        async with self.uow:
            trades = await self.uow.trades.list_by_user(query.user_id)
        return [TradeDTO.from_entity(t) for t in trades]


class ListEventTradesHandler(QueryHandler[ListEventTradesQuery, list[TradeDTO]]):
    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: ListEventTradesQuery) -> list[TradeDTO]:
        async with self.uow:
            trades = await self.uow.trades.list_by_event(query.event_id)
        return [TradeDTO.from_entity(t) for t in trades]


class GetEventTradeSummaryHandler(QueryHandler[GetEventTradeSummaryQuery, EventTradeSummaryDTO]):
    """Aggregates trades event по options (всі статуси, без user IDs)."""

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetEventTradeSummaryQuery) -> EventTradeSummaryDTO:
        async with self.uow:
            trades = await self.uow.trades.list_by_event(query.event_id)

        options: dict[int, OptionTradeSummaryDTO] = {}
        total_amount = Decimal("0")
        for trade in trades:
            summary = options.setdefault(trade.option_id, OptionTradeSummaryDTO())
            summary.count += 1
            summary.amount += trade.amount
            total_amount += trade.amount

        return EventTradeSummaryDTO(
            event_id=query.event_id,
            total_trades=len(trades),
            total_amount=total_amount,
            options=options,
        )
