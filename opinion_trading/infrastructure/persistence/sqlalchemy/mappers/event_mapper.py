"""Event Mapper - converts between Event aggregate and EventModel ORM."""

from opinion_trading.domain.events import Event, EventOption, EventStatus
from opinion_trading.infrastructure.persistence.sqlalchemy.models import (
    EventModel,
    EventOptionModel,
)

from ._time import as_utc


class EventMapper:
    """Mapper для Event aggregate ↔ EventModel (+ EventOptionModel rows).

    Example:
        >>> mapper = EventMapper()
        >>> model = mapper.to_model(event)  # Domain → ORM (з options)
        >>> event_back = mapper.to_entity(model)  # ORM → Domain
    """

    def to_entity(self, model: EventModel) -> Event:
        """Convert ORM EventModel → Domain Event (options в порядку position)."""
        event = Event(
            id=model.id,
            title=model.title,
            description=model.description,
            category=model.category,
            start_time=as_utc(model.start_time),
            end_time=as_utc(model.end_time),
            status=EventStatus(model.status),
            options=[self.option_to_value_object(o) for o in model.options],
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            settled_at=as_utc(model.settled_at),
        )

        # ВАЖЛИВО: Clear domain events (не хочемо replay events з DB)
        event.clear_domain_events()

        return event

    def to_model(self, entity: Event) -> EventModel:
        """Convert Domain Event → new ORM EventModel."""
        return EventModel(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            category=entity.category,
            start_time=entity.start_time,
            end_time=entity.end_time,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            settled_at=entity.settled_at,
            options=[
                self.option_to_model(option, position)
                for position, option in enumerate(entity.options)
            ],
        )

    def update_model_from_entity(
        self, model: EventModel, entity: Event
    ) -> list[EventOptionModel]:
        """Update існуючого EventModel з domain Event.

        Options синхронізуються по id: існуючі оновлюються, нові
        додаються, відсутні видаляються (delete-orphan).

        Returns:
            Option models в порядку entity.options (IDs нових з'являться
            після flush).
        """
        model.title = entity.title
        model.description = entity.description
        model.category = entity.category
        model.start_time = entity.start_time
        model.end_time = entity.end_time
        model.status = entity.status.value
        model.updated_at = entity.updated_at
        model.settled_at = entity.settled_at
        model.version += 1

        existing = {option.id: option for option in model.options}
        ordered: list[EventOptionModel] = []
        for position, option in enumerate(entity.options):
            option_model = existing.pop(option.id, None) if option.id is not None else None
            if option_model is None:
                option_model = self.option_to_model(option, position)
                model.options.append(option_model)
            else:
                option_model.name = option.name
                option_model.odds = option.odds
                option_model.result = option.result
                option_model.position = position
            ordered.append(option_model)

        for stale in existing.values():
            model.options.remove(stale)

        return ordered

    @staticmethod
    def option_to_value_object(model: EventOptionModel) -> EventOption:
        return EventOption(
            id=model.id,
            name=model.name,
            odds=model.odds,
            result=model.result,
        )

    @staticmethod
    def option_to_model(option: EventOption, position: int) -> EventOptionModel:
        return EventOptionModel(
            id=option.id,
            name=option.name,
            odds=option.odds,
            result=option.result,
            position=position,
        )
