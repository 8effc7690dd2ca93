"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field

from kungfu import Result, Ok, Error, LazyCoroResult


# Types
@dataclass(frozen=True, slots=True)
class UserId:
    value: int


@dataclass(frozen=True, slots=True)
class User:
    id: UserId
    name: str
    email: str
    tier: str = "standard"


# Errors
@dataclass(frozen=True, slots=True)
class HttpError:
    """Transport-level failure."""

    reason: str

    def __str__(self) -> str:
        return self.reason


@dataclass(frozen=True, slots=True)
class NotFound:
    """Service-level failure."""

    entity: str
    id: int | str

    def __str__(self) -> str:
        return f"{self.entity}:{self.id} not found"


# Fake API: outer Result is the wire, inner Result is the service's answer
@dataclass(slots=True)
class FakeApi:
    users: dict[int, User] = field(default_factory=lambda: {
        1: User(UserId(1), "Alice", "alice@example.com", "gold"),
        2: User(UserId(2), "Bob", "bob@example.com", "silver"),
    })
    offline: bool = False

    def get_user(
        self, user_id: UserId
    ) -> LazyCoroResult[Result[User, NotFound], HttpError]:
        async def _call() -> Result[Result[User, NotFound], HttpError]:
            await asyncio.sleep(0.01)
            if self.offline:
                return Error(HttpError("timeout"))
            user = self.users.get(user_id.value)
            return Ok(Ok(user) if user else Error(NotFound("User", user_id.value)))

        return LazyCoroResult(_call)


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
