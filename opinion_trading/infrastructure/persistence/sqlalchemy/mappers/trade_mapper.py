"""Trade Mapper - converts between Trade entity and TradeModel ORM."""

from opinion_trading.domain.trading import Trade, TradeOutcome, TradeStatus
from opinion_trading.infrastructure.persistence.sqlalchemy.models import TradeModel

from ._time import as_utc


class TradeMapper:
    """Mapper для Trade entity ↔ TradeModel ORM.

    Responsibilities:
    - Convert domain Trade entity → ORM TradeModel (to_model)
    - Convert ORM TradeModel → domain Trade entity (to_entity)
    - Handle enum conversions (TradeStatus, TradeOutcome)
    """

    def to_entity(self, model: TradeModel) -> Trade:
        """Convert ORM TradeModel → Domain Trade entity."""
        trade = Trade(
            id=model.id,
            user_id=model.user_id,
            event_id=model.event_id,
            option_id=model.option_id,
            amount=model.amount,
            status=TradeStatus(model.status),
            outcome=TradeOutcome(model.outcome) if model.outcome else None,
            settlement_amount=model.settlement_amount,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

        # ВАЖЛИВО: Clear domain events (не хочемо replay events з DB)
        trade.clear_domain_events()

        return trade

    def to_model(self, entity: Trade) -> TradeModel:
        """Convert Domain Trade entity → ORM TradeModel."""
        return TradeModel(
            id=entity.id,
            user_id=entity.user_id,
            event_id=entity.event_id,
            option_id=entity.option_id,
            amount=entity.amount,
            status=entity.status.value,  # Enum → string
            outcome=entity.outcome.value if entity.outcome else None,
            settlement_amount=entity.settlement_amount,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def transition_values(self, entity: Trade) -> dict:
        """Column values змінні при status transition (cancel / settle)."""
        return {
            "status": entity.status.value,
            "outcome": entity.outcome.value if entity.outcome else None,
            "settlement_amount": entity.settlement_amount,
            "updated_at": entity.updated_at,
        }

    def update_model_from_entity(self, model: TradeModel, entity: Trade) -> TradeModel:
        """Update існуючого TradeModel з domain entity.

        Note:
            user_id / event_id / option_id / amount immutable - не копіюються.
        """
        for column, value in self.transition_values(entity).items():
            setattr(model, column, value)

        # Increment version (optimistic locking)
        model.version += 1

        return model
