#!/usr/bin/env python3
"""
Basic usage example.

Triggers a single event and a batch of events.

Required environment variables (or a .env file):
    BROADCASTT_APP_ID
    BROADCASTT_APP_KEY
    BROADCASTT_APP_SECRET
"""

import logging

from dotenv import load_dotenv

from broadcastt import BroadcasttClient, TransportError

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    with BroadcasttClient() as client:
        client.use_tls()

        try:
            ok = client.trigger("notifications", "alert", {"message": "Disk almost full"})
            logger.info("trigger ok=%s", ok)

            ok = client.trigger_batch([
                {"channel": "room-1", "name": "joined", "data": {"user": 7}},
                {"channel": "room-2", "name": "left", "data": {"user": 9}},
            ])
            logger.info("batch ok=%s", ok)
        except TransportError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("request failed status=%s error=%s", status, e)


if __name__ == "__main__":
    main()
