"""
RemoteData — four states instead of isLoading/error/data flags.

Level 3: remotedata.remote
Level 2: remotedata.response
Level 1: kungfu.Result
"""

from remotedata import response as R
from remotedata import remote as RD
from remotedata import Transport, Custom
from examples._infra import banner, run, UserId, User, HttpError, NotFound, FakeApi


api = FakeApi()

type UserData = RD.RemoteData[HttpError, NotFound, User]


def render(data: UserData) -> str:
    match data:
        case RD.NotAsked():
            return "press the button"
        case RD.Loading():
            return "spinner"
        case RD.Failure(Transport(e)):
            return f"check your connection ({e})"
        case RD.Failure(Custom(e)):
            return f"nothing here ({e})"
        case RD.Success(user):
            return f"hello, {user.name}"


async def main() -> None:
    banner("RemoteData: Exhaustive Rendering")

    for uid, offline in ((UserId(1), False), (UserId(7), False), (UserId(2), True)):
        api.offline = offline
        data: UserData = RD.NotAsked()
        print(f"\nuser {uid.value} (offline={offline}):")
        print(f"   {render(data)}")
        data = RD.Loading()
        print(f"   {render(data)}")
        data = RD.from_response(await R.resolve(api.get_user(uid)))
        print(f"   {render(data)}")
        emails = RD.map(lambda u: u.email, data)
        print(f"   email or default: {RD.with_default('n/a', emails)}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
