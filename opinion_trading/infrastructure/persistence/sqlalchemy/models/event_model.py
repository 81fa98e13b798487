"""Event ORM Models - events та їх outcome options."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, IdType


class EventModel(Base):
    """ORM model для Event aggregate.

    Options завантажуються разом з event (selectin) - aggregate boundary.
    """

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    status: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )  # "upcoming", "live", "closed", "settled"

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    settled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    options: Mapped[list["EventOptionModel"]] = relationship(
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="EventOptionModel.position",
        lazy="selectin",
    )

    __table_args__ = (
        # Ingestion dedupe: title within category
        Index("ix_events_category_title", "category", "title"),
    )

    def __repr__(self) -> str:
        return f"<EventModel(id={self.id}, title={self.title}, status={self.status})>"


class EventOptionModel(Base):
    """ORM model для EventOption value object."""

    __tablename__ = "event_options"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    event_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True
    )

    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    odds: Mapped[Decimal] = mapped_column(Numeric(precision=20, scale=8), nullable=False)
    result: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    event: Mapped[EventModel] = relationship(back_populates="options")

    def __repr__(self) -> str:
        return f"<EventOptionModel(id={self.id}, name={self.name}, odds={self.odds})>"
