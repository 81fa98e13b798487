"""Trade Aggregate Root - stake користувача на одну option одного event.

Trade lifecycle:
1. place(): створюється одразу в EXECUTED (stake списаний в тій же транзакції)
2. cancel(): EXECUTED → CANCELLED, stake повертається повністю
3. settle(): EXECUTED → SETTLED, outcome + settlement_amount встановлені
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from opinion_trading.domain.shared import AggregateRoot, ValidationFailure

from ..exceptions.trading_exceptions import InvalidTradeStateError
from ..value_objects import TradeOutcome, TradeStatus


class Trade(AggregateRoot):
    """Trade Aggregate Root.

    Правила:
    - amount > 0
    - user_id / event_id / option_id immutable після створення
    - outcome і settlement_amount встановлені тоді і тільки тоді, коли SETTLED
    - CANCELLED і SETTLED - terminal

    Example:
        >>> trade = Trade.place(user_id=1, event_id=10, option_id=3, amount=Decimal("200"))
        >>> trade.status
        <TradeStatus.EXECUTED: 'executed'>
        >>> trade.settle(won=True, payout=Decimal("108.10810811"))
        >>> trade.outcome
        <TradeOutcome.WIN: 'win'>
    """

    def __init__(
        self,
        user_id: int,
        event_id: int,
        option_id: int,
        amount: Decimal,
        status: TradeStatus = TradeStatus.EXECUTED,
        outcome: Optional[TradeOutcome] = None,
        settlement_amount: Optional[Decimal] = None,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> None:
        """Initialize trade.

        Args:
            user_id: ID користувача.
            event_id: ID event.
            option_id: ID option в межах event.
            amount: Stake.
            status: Поточний статус.
            outcome: WIN/LOSS (тільки для SETTLED).
            settlement_amount: Payout (0 для losers, тільки для SETTLED).
            id: Trade ID (None для нових).
        """
        super().__init__(id)

        self._validate_amount(amount)

        self._user_id = user_id
        self._event_id = event_id
        self._option_id = option_id
        self.amount = amount

        self.status = status
        self.outcome = outcome
        self.settlement_amount = settlement_amount

        now = datetime.now(timezone.utc)
        self.created_at = created_at or now
        self.updated_at = updated_at or now

    @classmethod
    def place(
        cls,
        user_id: int,
        event_id: int,
        option_id: int,
        amount: Decimal,
    ) -> "Trade":
        """Factory method для нового trade.

        Returns:
            Trade в EXECUTED status (ще без ID).

        Raises:
            ValidationFailure: Якщо amount <= 0.
        """
        return cls(
            user_id=user_id,
            event_id=event_id,
            option_id=option_id,
            amount=amount,
            status=TradeStatus.EXECUTED,
        )

    # Immutable references
    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def event_id(self) -> int:
        return self._event_id

    @property
    def option_id(self) -> int:
        return self._option_id

    def record_placed(self) -> None:
        """Emit TradeCreatedEvent (після INSERT, коли є ID)."""
        from ..events.trade_events import TradeCreatedEvent

        if self.id is None:
            raise RuntimeError("Trade must be saved before recording events")
        self.add_domain_event(TradeCreatedEvent(**self._snapshot()))

    def cancel(self) -> None:
        """Cancel trade (refund робить handler через UserRepository).

        Raises:
            InvalidTradeStateError: Якщо trade не EXECUTED.
        """
        from ..events.trade_events import TradeCancelledEvent

        self._ensure_executed("Only executed trades can be cancelled")

        self.status = TradeStatus.CANCELLED
        self.updated_at = datetime.now(timezone.utc)

        self.add_domain_event(TradeCancelledEvent(**self._snapshot()))

    def settle(self, won: bool, payout: Decimal) -> None:
        """Settle trade з outcome та payout.

        Args:
            won: Чи trade на winning option.
            payout: Сума до зарахування (0 для losers).

        Raises:
            InvalidTradeStateError: Якщо trade не EXECUTED.
        """
        from ..events.trade_events import TradeSettledEvent

        self._ensure_executed("Only executed trades can be settled")

        self.status = TradeStatus.SETTLED
        self.outcome = TradeOutcome.WIN if won else TradeOutcome.LOSS
        self.settlement_amount = payout if won else Decimal("0")
        self.updated_at = datetime.now(timezone.utc)

        self.add_domain_event(
            TradeSettledEvent(
                **self._snapshot(),
                won=won,
                payout=self.settlement_amount,
            )
        )

    @property
    def is_executed(self) -> bool:
        """Check if trade активний (можна cancel або settle)."""
        return self.status == TradeStatus.EXECUTED

    @property
    def is_final_state(self) -> bool:
        """Check if trade в final state (не може змінитись)."""
        return self.status in (TradeStatus.SETTLED, TradeStatus.CANCELLED)

    def _ensure_executed(self, message: str) -> None:
        if self.status != TradeStatus.EXECUTED:
            raise InvalidTradeStateError(
                message,
                trade_id=self.id,
                current_status=self.status.value,
            )

    def _snapshot(self) -> dict:
        return {
            "trade_id": self.id,
            "user_id": self.user_id,
            "event_id": self.event_id,
            "option_id": self.option_id,
            "amount": self.amount,
            "status": self.status.value,
            "outcome": self.outcome.value if self.outcome else None,
            "settlement_amount": self.settlement_amount,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @staticmethod
    def _validate_amount(amount: Decimal) -> None:
        if amount is None or amount <= Decimal("0"):
            raise ValidationFailure(
                "Trade amount must be positive",
                amount=str(amount),
            )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Trade(id={self.id}, user_id={self.user_id}, event_id={self.event_id}, "
            f"option_id={self.option_id}, amount={self.amount}, status={self.status.value})"
        )
