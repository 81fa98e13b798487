"""Events API routes - event lifecycle (admin) та public listing."""

import logging

from fastapi import APIRouter, status

from opinion_trading.application.events.commands import (
    CreateEventCommand,
    DeleteEventCommand,
    FetchExternalEventsCommand,
    SettleEventCommand,
    UpdateEventCommand,
)
from opinion_trading.application.events.queries import (
    GetEventQuery,
    ListEventsByCategoryQuery,
    ListEventsQuery,
)
from opinion_trading.presentation.api.dependencies import (
    AdminPrincipal,
    CreateEventHandlerDep,
    DeleteEventHandlerDep,
    FetchExternalEventsHandlerDep,
    GetEventHandlerDep,
    ListEventsByCategoryHandlerDep,
    ListEventsHandlerDep,
    SettleEventHandlerDep,
    UpdateEventHandlerDep,
)
from opinion_trading.presentation.api.v1.schemas import (
    CreateEventRequest,
    ErrorResponse,
    EventOptionRequest,
    EventResponse,
    FetchExternalEventsResponse,
    MessageResponse,
    SettleRequest,
    UpdateEventRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["Events"])


def _options(options: list[EventOptionRequest]) -> tuple:
    return tuple((option.name, option.odds) for option in options)


# ============================================================================
# PUBLIC
# ============================================================================


@router.get("", response_model=list[EventResponse], summary="List events")
async def list_events(handler: ListEventsHandlerDep) -> list[EventResponse]:
    events = await handler.handle(ListEventsQuery())
    return [EventResponse.model_validate(e) for e in events]


@router.get(
    "/category/{category}",
    response_model=list[EventResponse],
    summary="List events by category",
)
async def list_events_by_category(
    category: str,
    handler: ListEventsByCategoryHandlerDep,
) -> list[EventResponse]:
    events = await handler.handle(ListEventsByCategoryQuery(category=category))
    return [EventResponse.model_validate(e) for e in events]


@router.get(
    "/{event_id}",
    response_model=EventResponse,
    summary="Get event",
    responses={404: {"model": ErrorResponse, "description": "Event not found"}},
)
async def get_event(event_id: int, handler: GetEventHandlerDep) -> EventResponse:
    return EventResponse.model_validate(await handler.handle(GetEventQuery(event_id=event_id)))


# ============================================================================
# ADMIN
# ============================================================================


@router.post(
    "",
    response_model=EventResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create event",
    responses={400: {"model": ErrorResponse, "description": "Invalid event"}},
)
async def create_event(
    request: CreateEventRequest,
    principal: AdminPrincipal,
    handler: CreateEventHandlerDep,
) -> EventResponse:
    event = await handler.handle(
        CreateEventCommand(
            title=request.title,
            description=request.description,
            category=request.category,
            start_time=request.start_time,
            end_time=request.end_time,
            options=_options(request.options),
        )
    )
    logger.info("api.create_event.success", extra={"event_id": event.id, "admin_id": principal.user_id})
    return EventResponse.model_validate(event)


@router.post(
    "/fetch-external",
    response_model=FetchExternalEventsResponse,
    summary="Ingest events from external feed",
    description="Best-effort: feed failures are logged and reported as 0 created events.",
)
async def fetch_external_events(
    principal: AdminPrincipal,
    handler: FetchExternalEventsHandlerDep,
) -> FetchExternalEventsResponse:
    created = await handler.handle(FetchExternalEventsCommand())
    return FetchExternalEventsResponse(
        message=f"Fetched {created} new events",
        created_count=created,
    )


@router.put(
    "/{event_id}",
    response_model=EventResponse,
    summary="Update event",
    responses={
        404: {"model": ErrorResponse, "description": "Event not found"},
        409: {"model": ErrorResponse, "description": "Invalid status transition"},
    },
)
async def update_event(
    event_id: int,
    request: UpdateEventRequest,
    principal: AdminPrincipal,
    handler: UpdateEventHandlerDep,
) -> EventResponse:
    event = await handler.handle(
        UpdateEventCommand(
            event_id=event_id,
            title=request.title,
            description=request.description,
            category=request.category,
            start_time=request.start_time,
            end_time=request.end_time,
            status=request.status,
            options=_options(request.options) if request.options is not None else None,
        )
    )
    return EventResponse.model_validate(event)


@router.put(
    "/{event_id}/settle",
    response_model=EventResponse,
    summary="Mark winning option (no payouts)",
    responses={
        404: {"model": ErrorResponse, "description": "Event or option not found"},
        409: {"model": ErrorResponse, "description": "Event cannot be settled"},
    },
)
async def settle_event(
    event_id: int,
    request: SettleRequest,
    principal: AdminPrincipal,
    handler: SettleEventHandlerDep,
) -> EventResponse:
    event = await handler.handle(
        SettleEventCommand(event_id=event_id, winning_option_id=request.winning_option_id)
    )
    return EventResponse.model_validate(event)


@router.delete(
    "/{event_id}",
    response_model=MessageResponse,
    summary="Delete event",
    responses={404: {"model": ErrorResponse, "description": "Event not found"}},
)
async def delete_event(
    event_id: int,
    principal: AdminPrincipal,
    handler: DeleteEventHandlerDep,
) -> MessageResponse:
    await handler.handle(DeleteEventCommand(event_id=event_id))
    return MessageResponse(message="Event deleted successfully")
