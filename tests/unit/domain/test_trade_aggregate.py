"""Tests для Trade Aggregate Root."""

from decimal import Decimal

import pytest

from opinion_trading.domain.shared import ValidationFailure
from opinion_trading.domain.trading import (
    InvalidTradeStateError,
    Trade,
    TradeOutcome,
    TradeStatus,
)


class TestTradeCreation:
    """Tests для Trade.place()."""

    def test_place_trade_executed(self, sample_trade_data):
        """Test: новий trade одразу EXECUTED, без outcome."""
        trade = Trade.place(**sample_trade_data)

        assert trade.id is None
        assert trade.status == TradeStatus.EXECUTED
        assert trade.amount == Decimal("200")
        assert trade.outcome is None
        assert trade.settlement_amount is None
        assert trade.is_executed
        assert not trade.is_final_state

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-10")])
    def test_place_with_non_positive_amount_fails(self, sample_trade_data, amount):
        """Test: amount має бути > 0."""
        sample_trade_data["amount"] = amount

        with pytest.raises(ValidationFailure) as exc_info:
            Trade.place(**sample_trade_data)

        assert exc_info.value.message == "Trade amount must be positive"

    def test_record_placed_requires_id(self, sample_trade_data):
        """Test: TradeCreatedEvent тільки після save."""
        trade = Trade.place(**sample_trade_data)

        with pytest.raises(RuntimeError):
            trade.record_placed()


class TestTradeStateTransitions:
    """Tests для cancel() / settle()."""

    def test_cancel_executed_trade(self, sample_trade_data):
        """Test: EXECUTED → CANCELLED."""
        trade = Trade.place(**sample_trade_data)

        trade.cancel()

        assert trade.status == TradeStatus.CANCELLED
        assert trade.outcome is None
        assert trade.is_final_state

    def test_settle_winner(self, sample_trade_data):
        """Test: winner отримує payout як settlement_amount."""
        trade = Trade.place(**sample_trade_data)

        trade.settle(won=True, payout=Decimal("108.10810811"))

        assert trade.status == TradeStatus.SETTLED
        assert trade.outcome == TradeOutcome.WIN
        assert trade.settlement_amount == Decimal("108.10810811")

    def test_settle_loser_gets_zero(self, sample_trade_data):
        """Test: loser settlement_amount = 0 навіть якщо payout передали."""
        trade = Trade.place(**sample_trade_data)

        trade.settle(won=False, payout=Decimal("50"))

        assert trade.outcome == TradeOutcome.LOSS
        assert trade.settlement_amount == Decimal("0")

    def test_cannot_cancel_settled_trade(self, sample_trade_data):
        """Test: SETTLED - terminal."""
        trade = Trade.place(**sample_trade_data)
        trade.settle(won=True, payout=Decimal("100"))

        with pytest.raises(InvalidTradeStateError) as exc_info:
            trade.cancel()

        assert exc_info.value.message == "Only executed trades can be cancelled"
        assert trade.status == TradeStatus.SETTLED

    def test_cannot_settle_cancelled_trade(self, sample_trade_data):
        """Test: CANCELLED - terminal."""
        trade = Trade.place(**sample_trade_data)
        trade.cancel()

        with pytest.raises(InvalidTradeStateError) as exc_info:
            trade.settle(won=True, payout=Decimal("100"))

        assert exc_info.value.message == "Only executed trades can be settled"
        assert trade.settlement_amount is None
