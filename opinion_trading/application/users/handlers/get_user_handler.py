"""GetUser Query Handler."""

from opinion_trading.application.shared import QueryHandler, UnitOfWork
from opinion_trading.application.users.dtos import UserDTO
from opinion_trading.application.users.queries import GetUserQuery
from opinion_trading.domain.users import UserNotFoundError


class GetUserHandler(QueryHandler[GetUserQuery, UserDTO]):
    """Handler для GetUser query."""

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: GetUserQuery) -> UserDTO:
        async with self.uow:
            user = await self.uow.users.get_by_id(query.user_id)

        if user is None:
            raise UserNotFoundError("User not found", user_id=query.user_id)
        return UserDTO.from_entity(user)
