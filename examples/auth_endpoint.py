#!/usr/bin/env python3
"""
Channel authorization example.

Prints the payload a server endpoint would return to a browser that wants to
join a private or presence channel.

Usage:
    python auth_endpoint.py private-chat 1234.5678
    python auth_endpoint.py presence-lobby 1234.5678 user-7

Required environment variables (or a .env file):
    BROADCASTT_APP_ID
    BROADCASTT_APP_KEY
    BROADCASTT_APP_SECRET
"""

import sys

from dotenv import load_dotenv

from broadcastt import BroadcasttClient, BroadcasttError

load_dotenv()


def main(argv: list[str]) -> int:
    if len(argv) not in (2, 3):
        print(__doc__)
        return 2

    channel, socket_id = argv[0], argv[1]
    client = BroadcasttClient()

    try:
        if channel.startswith("presence-"):
            user_id = argv[2] if len(argv) == 3 else "anonymous"
            print(client.presence_auth(channel, socket_id, user_id, {"name": user_id}))
        else:
            print(client.private_auth(channel, socket_id))
    except BroadcasttError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
