"""Tests для trading engine use cases (create / cancel / settle trades)."""

import asyncio
from decimal import Decimal

import pytest

from opinion_trading.application.events.commands import SettleEventCommand
from opinion_trading.application.events.handlers import SettleEventHandler
from opinion_trading.application.trading.commands import (
    CancelTradeCommand,
    CreateTradeCommand,
    SettleTradesCommand,
)
from opinion_trading.application.trading.handlers import (
    CancelTradeHandler,
    CreateTradeHandler,
    GetEventTradeSummaryHandler,
    SettleTradesHandler,
)
from opinion_trading.application.trading.queries import GetEventTradeSummaryQuery
from opinion_trading.domain.events import (
    EventNotFoundError,
    EventNotSettleableError,
    EventNotTradableError,
    EventStatus,
    EventTradesSettledEvent,
    OptionNotFoundError,
)
from opinion_trading.domain.shared import ValidationFailure
from opinion_trading.domain.trading import (
    InsufficientBalanceError,
    InvalidTradeStateError,
    TradeCreatedEvent,
    TradeNotFoundError,
    TradeSettledEvent,
)
from opinion_trading.domain.users import UserNotFoundError
from opinion_trading.infrastructure.persistence.sqlalchemy import SQLAlchemyUnitOfWork


@pytest.fixture
def create_trade_handler(uow, event_bus):
    return CreateTradeHandler(uow=uow, event_bus=event_bus)


@pytest.fixture
def settle_trades_handler(uow, event_bus, settlement_locks):
    return SettleTradesHandler(uow=uow, event_bus=event_bus, settlement_locks=settlement_locks)


async def _balance(uow, user_id: int) -> Decimal:
    async with uow:
        return (await uow.users.get_by_id(user_id)).balance


class TestCreateTrade:
    """Tests для CreateTradeHandler."""

    async def test_create_trade_debits_balance(self, uow, create_user, create_event, create_trade_handler, published):
        """Test: trade EXECUTED, balance 1000 → 800, trade_created published."""
        # Arrange
        user = await create_user()
        event = await create_event()
        chiefs = event.options[0].id

        # Act
        trade = await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=chiefs, amount=Decimal("200"))
        )

        # Assert
        assert trade.id > 0
        assert trade.status == "executed"
        assert trade.amount == Decimal("200")
        assert await _balance(uow, user.id) == Decimal("800")
        created = [e for e in published if isinstance(e, TradeCreatedEvent)]
        assert len(created) == 1
        assert created[0].trade_id == trade.id

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5")])
    async def test_non_positive_amount_checked_first(self, create_trade_handler, amount):
        """Test: amount перевіряється до user lookup."""
        with pytest.raises(ValidationFailure) as exc_info:
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=999, event_id=999, option_id=1, amount=amount)
            )

        assert exc_info.value.message == "Amount must be greater than 0"

    async def test_unknown_user(self, create_event, create_trade_handler):
        event = await create_event()

        with pytest.raises(UserNotFoundError):
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=999, event_id=event.id, option_id=event.options[0].id, amount=Decimal("10"))
            )

    async def test_insufficient_balance(self, uow, create_user, create_event, create_trade_handler, published):
        """Test: stake > balance → нічого не змінюється."""
        user = await create_user(balance=Decimal("100"))
        event = await create_event()

        with pytest.raises(InsufficientBalanceError):
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=event.options[0].id, amount=Decimal("100.01"))
            )

        assert await _balance(uow, user.id) == Decimal("100")
        async with uow:
            assert await uow.trades.list_by_user(user.id) == []
        assert not [e for e in published if isinstance(e, TradeCreatedEvent)]

    async def test_balance_checked_before_event(self, create_user, create_trade_handler):
        """Test: порядок перевірок - balance до event lookup."""
        user = await create_user(balance=Decimal("10"))

        with pytest.raises(InsufficientBalanceError):
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=user.id, event_id=999, option_id=1, amount=Decimal("50"))
            )

    async def test_unknown_event(self, create_user, create_trade_handler):
        user = await create_user()

        with pytest.raises(EventNotFoundError):
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=user.id, event_id=999, option_id=1, amount=Decimal("10"))
            )

    @pytest.mark.parametrize("status", [EventStatus.UPCOMING, EventStatus.CLOSED])
    async def test_event_not_live(self, uow, create_user, create_event, create_trade_handler, status):
        user = await create_user()
        event = await create_event(status=status)

        with pytest.raises(EventNotTradableError):
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=event.options[0].id, amount=Decimal("10"))
            )

        assert await _balance(uow, user.id) == Decimal("1000")

    async def test_option_from_other_event(self, uow, create_user, create_event, create_trade_handler):
        """Test: option має належати саме цьому event."""
        user = await create_user()
        event = await create_event()
        other = await create_event()

        with pytest.raises(OptionNotFoundError):
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=other.options[0].id, amount=Decimal("10"))
            )

        assert await _balance(uow, user.id) == Decimal("1000")

    async def test_whole_balance_can_be_staked(self, uow, create_user, create_event, create_trade_handler):
        """Test: stake == balance дозволено, наступний trade - ні."""
        user = await create_user(balance=Decimal("50"))
        event = await create_event()
        option_id = event.options[0].id

        await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=option_id, amount=Decimal("50"))
        )
        with pytest.raises(InsufficientBalanceError):
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=option_id, amount=Decimal("0.01"))
            )

        assert await _balance(uow, user.id) == Decimal("0")


class TestCancelTrade:
    """Tests для CancelTradeHandler."""

    async def test_cancel_refunds_stake(self, uow, event_bus, create_user, create_event, create_trade_handler):
        user = await create_user()
        event = await create_event()
        trade = await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=event.options[0].id, amount=Decimal("200"))
        )

        cancelled = await CancelTradeHandler(uow=uow, event_bus=event_bus).handle(
            CancelTradeCommand(trade_id=trade.id)
        )

        assert cancelled.status == "cancelled"
        assert await _balance(uow, user.id) == Decimal("1000")

    async def test_cancel_twice_rejected(self, uow, event_bus, create_user, create_event, create_trade_handler):
        """Test: повторний cancel не робить другий refund."""
        user = await create_user()
        event = await create_event()
        trade = await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=event.options[0].id, amount=Decimal("200"))
        )
        handler = CancelTradeHandler(uow=uow, event_bus=event_bus)
        await handler.handle(CancelTradeCommand(trade_id=trade.id))

        with pytest.raises(InvalidTradeStateError):
            await handler.handle(CancelTradeCommand(trade_id=trade.id))

        assert await _balance(uow, user.id) == Decimal("1000")

    async def test_cancel_settled_trade_rejected(
        self, uow, event_bus, create_user, create_event, create_trade_handler, settle_trades_handler
    ):
        """Test: settled trade не можна скасувати, payout не повертається вдруге."""
        user = await create_user()
        event = await create_event()
        chiefs = event.options[0].id
        trade = await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=chiefs, amount=Decimal("200"))
        )
        await settle_trades_handler.handle(SettleTradesCommand(event_id=event.id, winning_option_id=chiefs))

        with pytest.raises(InvalidTradeStateError):
            await CancelTradeHandler(uow=uow, event_bus=event_bus).handle(CancelTradeCommand(trade_id=trade.id))

        assert await _balance(uow, user.id) == Decimal("908.10810811")

    async def test_cancel_unknown_trade(self, uow, event_bus):
        with pytest.raises(TradeNotFoundError):
            await CancelTradeHandler(uow=uow, event_bus=event_bus).handle(CancelTradeCommand(trade_id=999))


class TestSettleTrades:
    """Tests для SettleTradesHandler - рух грошей при settlement."""

    async def test_settlement_pays_winners_at_odds(
        self, uow, create_user, create_event, create_trade_handler, settle_trades_handler, published
    ):
        """Test: 200 на Chiefs (1.85) → payout 108.10810811, balance 908.10810811."""
        # Arrange
        winner = await create_user("alice")
        loser = await create_user("bob")
        event = await create_event()
        chiefs, ravens = event.options[0].id, event.options[1].id
        await create_trade_handler.handle(
            CreateTradeCommand(user_id=winner.id, event_id=event.id, option_id=chiefs, amount=Decimal("200"))
        )
        await create_trade_handler.handle(
            CreateTradeCommand(user_id=loser.id, event_id=event.id, option_id=ravens, amount=Decimal("300"))
        )

        # Act
        result = await settle_trades_handler.handle(
            SettleTradesCommand(event_id=event.id, winning_option_id=chiefs)
        )

        # Assert
        assert result.settled_trades_count == 2
        by_user = {t.user_id: t for t in result.trades}
        assert by_user[winner.id].outcome == "win"
        assert by_user[winner.id].settlement_amount == Decimal("108.10810811")
        assert by_user[loser.id].outcome == "loss"
        assert by_user[loser.id].settlement_amount == Decimal("0")

        assert await _balance(uow, winner.id) == Decimal("908.10810811")
        assert await _balance(uow, loser.id) == Decimal("700")

        async with uow:
            settled_event = await uow.events.get_by_id(event.id)
        assert settled_event.status == EventStatus.SETTLED
        assert settled_event.winning_option.id == chiefs

        assert len([e for e in published if isinstance(e, TradeSettledEvent)]) == 2
        assert isinstance(published[-1], EventTradesSettledEvent)

    async def test_even_odds_payout(self, uow, create_user, create_event, create_trade_handler, settle_trades_handler):
        """Test: odds 2.0, stake 100 → payout 50."""
        user = await create_user(balance=Decimal("100"))
        event = await create_event(options=[("Heads", Decimal("2.0")), ("Tails", Decimal("2.0"))])
        heads = event.options[0].id
        await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=heads, amount=Decimal("100"))
        )

        await settle_trades_handler.handle(SettleTradesCommand(event_id=event.id, winning_option_id=heads))

        assert await _balance(uow, user.id) == Decimal("50")

    async def test_settlement_is_idempotent(
        self, uow, create_user, create_event, create_trade_handler, settle_trades_handler
    ):
        """Test: другий виклик не платить вдруге."""
        user = await create_user()
        event = await create_event()
        chiefs = event.options[0].id
        await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=chiefs, amount=Decimal("200"))
        )
        await settle_trades_handler.handle(SettleTradesCommand(event_id=event.id, winning_option_id=chiefs))

        again = await settle_trades_handler.handle(SettleTradesCommand(event_id=event.id, winning_option_id=chiefs))

        assert again.settled_trades_count == 0
        assert await _balance(uow, user.id) == Decimal("908.10810811")

    async def test_concurrent_settlements_pay_once(
        self, session_factory, event_bus, settlement_locks, uow, create_user, create_event, create_trade_handler
    ):
        """Test: два паралельні settle → кожен trade оплачено рівно один раз."""
        user = await create_user()
        event = await create_event()
        chiefs = event.options[0].id
        await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=chiefs, amount=Decimal("200"))
        )

        def handler():
            return SettleTradesHandler(
                uow=SQLAlchemyUnitOfWork(session_factory),
                event_bus=event_bus,
                settlement_locks=settlement_locks,
            )

        command = SettleTradesCommand(event_id=event.id, winning_option_id=chiefs)
        first, second = await asyncio.gather(handler().handle(command), handler().handle(command))

        assert first.settled_trades_count + second.settled_trades_count == 1
        assert await _balance(uow, user.id) == Decimal("908.10810811")

    async def test_settle_after_event_settlement_same_winner(
        self, uow, event_bus, settlement_locks, create_user, create_event, create_trade_handler, settle_trades_handler
    ):
        """Test: SettleEvent (results) + SettleTrades (payouts) з тим самим winner."""
        user = await create_user()
        event = await create_event()
        chiefs, ravens = event.options[0].id, event.options[1].id
        await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=chiefs, amount=Decimal("200"))
        )
        await SettleEventHandler(uow=uow, event_bus=event_bus, settlement_locks=settlement_locks).handle(
            SettleEventCommand(event_id=event.id, winning_option_id=chiefs)
        )
        assert await _balance(uow, user.id) == Decimal("800")

        with pytest.raises(EventNotSettleableError):
            await settle_trades_handler.handle(SettleTradesCommand(event_id=event.id, winning_option_id=ravens))

        result = await settle_trades_handler.handle(SettleTradesCommand(event_id=event.id, winning_option_id=chiefs))

        assert result.settled_trades_count == 1
        assert await _balance(uow, user.id) == Decimal("908.10810811")

    async def test_cancelled_trades_not_settled(
        self, uow, event_bus, create_user, create_event, create_trade_handler, settle_trades_handler
    ):
        user = await create_user()
        event = await create_event()
        chiefs = event.options[0].id
        trade = await create_trade_handler.handle(
            CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=chiefs, amount=Decimal("200"))
        )
        await CancelTradeHandler(uow=uow, event_bus=event_bus).handle(CancelTradeCommand(trade_id=trade.id))

        result = await settle_trades_handler.handle(SettleTradesCommand(event_id=event.id, winning_option_id=chiefs))

        assert result.settled_trades_count == 0
        assert await _balance(uow, user.id) == Decimal("1000")

    async def test_upcoming_event_not_settleable(self, create_event, settle_trades_handler):
        event = await create_event(status=EventStatus.UPCOMING)

        with pytest.raises(EventNotSettleableError):
            await settle_trades_handler.handle(
                SettleTradesCommand(event_id=event.id, winning_option_id=event.options[0].id)
            )

    async def test_unknown_event_or_option(self, create_event, settle_trades_handler):
        event = await create_event()

        with pytest.raises(EventNotFoundError):
            await settle_trades_handler.handle(SettleTradesCommand(event_id=999, winning_option_id=1))
        with pytest.raises(OptionNotFoundError):
            await settle_trades_handler.handle(SettleTradesCommand(event_id=event.id, winning_option_id=999))

    async def test_money_is_conserved_until_settlement(
        self, uow, event_bus, create_user, create_event, create_trade_handler
    ):
        """Test: sum(balances) + executed stakes незмінна до settlement."""
        users = [await create_user(name) for name in ("alice", "bob", "carol")]
        event = await create_event()
        chiefs, ravens = event.options[0].id, event.options[1].id
        trades = []
        for user, option_id, amount in (
            (users[0], chiefs, "200"),
            (users[1], ravens, "350.5"),
            (users[2], chiefs, "999.99"),
            (users[0], ravens, "100"),
        ):
            trades.append(
                await create_trade_handler.handle(
                    CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=option_id, amount=Decimal(amount))
                )
            )
        await CancelTradeHandler(uow=uow, event_bus=event_bus).handle(CancelTradeCommand(trade_id=trades[1].id))

        balances = sum([await _balance(uow, u.id) for u in users], Decimal("0"))
        async with uow:
            executed = [t for t in await uow.trades.list_by_event(event.id) if t.is_executed]
        outstanding = sum((t.amount for t in executed), Decimal("0"))

        assert balances + outstanding == Decimal("3000")


class TestEventTradeSummary:

    async def test_summary_groups_by_option(self, uow, create_user, create_event, create_trade_handler):
        """Test: count + amount per option, без user IDs."""
        alice, bob = await create_user("alice"), await create_user("bob")
        event = await create_event()
        chiefs, ravens = event.options[0].id, event.options[1].id
        for user, option_id, amount in ((alice, chiefs, "200"), (bob, chiefs, "50"), (bob, ravens, "25")):
            await create_trade_handler.handle(
                CreateTradeCommand(user_id=user.id, event_id=event.id, option_id=option_id, amount=Decimal(amount))
            )

        summary = await GetEventTradeSummaryHandler(uow=uow).handle(GetEventTradeSummaryQuery(event_id=event.id))

        assert summary.total_trades == 3
        assert summary.total_amount == Decimal("275")
        assert summary.options[chiefs].count == 2
        assert summary.options[chiefs].amount == Decimal("250")
        assert summary.options[ravens].count == 1
