"""
Store — one Recyclable per key, absent key means never asked.

Level 4: remotedata.store
Level 3: remotedata.recyclable
Level 2: remotedata.response
"""

import logging

from remotedata import response as R
from remotedata import recyclable as RC
from remotedata import store as S
from examples._infra import banner, run, UserId, User, HttpError, NotFound, FakeApi


api = FakeApi()

type Users = dict[int, RC.Recyclable[HttpError, NotFound, User]]


async def load(uid: UserId, users: Users) -> Users:
    users = S.to_loading(uid.value, users)
    response = await R.resolve(api.get_user(uid))
    return S.merge_response(uid.value, response, users)


def forget(_: RC.Recyclable[HttpError, NotFound, User]) -> RC.NeverAsked:
    return RC.NeverAsked()


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="   [%(name)s] %(message)s")
    banner("Store: Keyed Recyclable States")

    users: Users = {}

    print("\n1. Load users 1 and 2:")
    users = await load(UserId(1), users)
    users = await load(UserId(2), users)
    print(f"   {users}")

    print("\n2. Lookup of a key never fetched:")
    print(f"   {S.get(3, users)}")

    print("\n3. Reload user 1 offline:")
    api.offline = True
    users = await load(UserId(1), users)
    print(f"   {S.get(1, users)}")

    print("\n4. Forget user 2 (key removed, not stored as NeverAsked):")
    users = S.update(2, forget, users)
    print(f"   keys: {sorted(users)}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
