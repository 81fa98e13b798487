"""Trade ORM Model - SQLAlchemy mapping для Trade aggregate."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IdType


class TradeModel(Base):
    """ORM model для Trade aggregate.

    Це ТІЛЬКИ для персистенції - БЕЗ business logic!
    Business logic в domain.trading.entities.Trade.

    Note:
        event_id / option_id без ForeignKey: видалення event не каскадиться
        на trades, вони зберігають посилання.
    """

    __tablename__ = "trades"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    user_id: Mapped[int] = mapped_column(IdType, nullable=False, index=True)
    event_id: Mapped[int] = mapped_column(IdType, nullable=False, index=True)
    option_id: Mapped[int] = mapped_column(IdType, nullable=False)

    amount: Mapped[Decimal] = mapped_column(Numeric(precision=20, scale=8), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )  # "pending", "executed", "settled", "cancelled"

    # Settlement data (тільки для settled)
    outcome: Mapped[str | None] = mapped_column(String(10), nullable=True)
    settlement_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(precision=20, scale=8), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Optimistic locking (для concurrent updates)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    __table_args__ = (
        # Query: settlement (executed trades of event)
        Index("ix_trades_event_status", "event_id", "status"),
        # Query: user history
        Index("ix_trades_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<TradeModel(id={self.id}, user_id={self.user_id}, "
            f"event_id={self.event_id}, amount={self.amount}, status={self.status})>"
        )
