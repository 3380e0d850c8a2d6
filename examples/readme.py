import logging
import os

import slotvec


def main():
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING"))

    users = slotvec.SlotVec()
    alice = users.insert("alice@example.com")
    bob = users.insert("bob@example.com")
    carol = users.insert("carol@example.com")
    print(users)

    print("removed:", users.remove(bob))
    print(len(users), "users,", users.occupancy)

    dave = users.insert("dave@example.com")
    print("dave reuses slot", dave)

    for ref in users.iter_mut():
        ref.value = ref.value.upper()

    for index, email in users.items():
        print(index, email)

    print("alice is still", users[alice], "and carol", users[carol])
    print("drained:", list(users.drain()))


main()
