"""
Recyclable — keep showing the last good value while reloading.

Key concepts:
- to_loading() when a request goes out
- merge_response() when it comes back
- A retained value survives reloads and failed reloads
- Only a fresh success replaces it

Level 3: remotedata.recyclable
Level 2: remotedata.response
Level 1: kungfu.Result
"""

from remotedata import response as R
from remotedata import recyclable as RC
from examples._infra import banner, run, UserId, User, HttpError, NotFound, FakeApi


api = FakeApi()

type UserState = RC.Recyclable[HttpError, NotFound, User]


def render(state: UserState) -> str:
    match state:
        case RC.NeverAsked():
            return "—"
        case RC.Loading():
            return "spinner"
        case RC.Failure(e):
            return f"error page: {e.error}"
        case RC.Ready(user):
            return f"{user.name}"
        case RC.Recycling(user, RC.LoadingStage()):
            return f"{user.name} (refreshing…)"
        case RC.Recycling(user, RC.FailureStage(e)):
            return f"{user.name} (stale: {e.error})"


async def fetch(uid: UserId, state: UserState) -> UserState:
    state = RC.to_loading(state)
    print(f"   dispatched → {render(state)}")
    response = await R.resolve(api.get_user(uid))
    return RC.merge_response(response, state)


async def main() -> None:
    banner("Recyclable: Reload Without Blanking")

    uid = UserId(1)
    state: UserState = RC.NeverAsked()
    print(f"\n0. Initial: {render(state)}")

    print("\n1. First fetch:")
    state = await fetch(uid, state)
    print(f"   settled    → {render(state)}")

    print("\n2. Reload while offline (value is kept):")
    api.offline = True
    state = await fetch(uid, state)
    print(f"   settled    → {render(state)}")
    print(f"   to_error   → {RC.to_error(state)}")

    print("\n3. Reload back online (fresh value replaces it):")
    api.offline = False
    api.users[1] = User(uid, "Alice Cooper", "alice@example.com", "gold")
    state = await fetch(uid, state)
    print(f"   settled    → {render(state)}")

    print("\n4. Switch to an unknown user (fresh lifecycle):")
    state = RC.from_response(await R.resolve(api.get_user(UserId(42))))
    print(f"   settled    → {render(state)}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
