"""CreateTrade Handler - core use case торгового engine."""

import logging
from decimal import Decimal

from opinion_trading.application.shared import CommandHandler, UnitOfWork
from opinion_trading.application.trading.commands import CreateTradeCommand
from opinion_trading.application.trading.dtos import TradeDTO
from opinion_trading.domain.events import EventNotFoundError
from opinion_trading.domain.shared import ValidationFailure
from opinion_trading.domain.trading import InsufficientBalanceError, Trade
from opinion_trading.domain.users import UserNotFoundError
from opinion_trading.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class CreateTradeHandler(CommandHandler[CreateTradeCommand, TradeDTO]):
    """Handler для CreateTrade command.

    Preconditions (в цьому порядку, кожна - окрема помилка):
    1. amount > 0 → ValidationFailure
    2. User exists → UserNotFoundError
    3. balance >= amount → InsufficientBalanceError
    4. Event exists → EventNotFoundError
    5. Event LIVE → EventNotTradableError
    6. Option belongs to event → OptionNotFoundError

    Effects в одній транзакції: conditional debit + INSERT trade (EXECUTED).
    Після commit: TradeCreatedEvent → "trade_created" в user-<id> та event-<id>.

    Example:
        >>> handler = CreateTradeHandler(uow=uow, event_bus=event_bus)
        >>> trade_dto = await handler.handle(
        ...     CreateTradeCommand(user_id=1, event_id=10, option_id=3, amount=Decimal("200"))
        ... )
        >>> trade_dto.status
        'executed'
    """

    def __init__(self, uow: UnitOfWork, event_bus: EventBus) -> None:
        """Initialize handler.

        Args:
            uow: Unit of Work для transaction management.
            event_bus: Event bus для publishing domain events.
        """
        self.uow = uow
        self.event_bus = event_bus

    async def handle(self, command: CreateTradeCommand) -> TradeDTO:
        """Create trade.

        Returns:
            TradeDTO нового trade.

        Raises:
            ValidationFailure: amount <= 0.
            UserNotFoundError: User не існує.
            InsufficientBalanceError: Недостатньо балансу.
            EventNotFoundError: Event не існує.
            EventNotTradableError: Event не LIVE.
            OptionNotFoundError: Option не належить event.
        """
        logger.info(
            "create_trade.started",
            extra={
                "user_id": command.user_id,
                "event_id": command.event_id,
                "option_id": command.option_id,
                "amount": str(command.amount),
            },
        )

        if command.amount is None or command.amount <= Decimal("0"):
            raise ValidationFailure(
                "Amount must be greater than 0",
                amount=str(command.amount),
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(command.user_id)
            if user is None:
                raise UserNotFoundError("User not found", user_id=command.user_id)

            if not user.can_afford(command.amount):
                raise InsufficientBalanceError(
                    "Insufficient balance",
                    user_id=user.id,
                    balance=str(user.balance),
                    amount=str(command.amount),
                )

            # Shared row lock: settlement (exclusive) не може пропустити цей trade
            event = await self.uow.events.get_for_update(command.event_id, read=True)
            if event is None:
                raise EventNotFoundError("Event not found", event_id=command.event_id)

            event.ensure_tradable()
            event.get_option(command.option_id)

            trade = Trade.place(
                user_id=user.id,
                event_id=event.id,
                option_id=command.option_id,
                amount=command.amount,
            )

            # Balance міг змінитись після read (конкурентний trade)
            if not await self.uow.users.debit_if_sufficient(user.id, command.amount):
                raise InsufficientBalanceError(
                    "Insufficient balance",
                    user_id=user.id,
                    amount=str(command.amount),
                )

            await self.uow.trades.save(trade)
            trade.record_placed()
            await self.uow.commit()

        logger.info(
            "create_trade.completed",
            extra={
                "trade_id": trade.id,
                "user_id": trade.user_id,
                "event_id": trade.event_id,
            },
        )

        await self.event_bus.publish_all(trade.get_domain_events())
        trade.clear_domain_events()

        return TradeDTO.from_entity(trade)
