"""GetUser Query - профіль користувача (для /auth/me)."""

from dataclasses import dataclass

from opinion_trading.application.shared import Query


@dataclass(frozen=True)
class GetUserQuery(Query):
    user_id: int
