"""DeleteEvent Command."""

from dataclasses import dataclass

from opinion_trading.application.shared import Command


@dataclass(frozen=True)
class DeleteEventCommand(Command):
    """Command для видалення event (trades не каскадяться)."""

    event_id: int
