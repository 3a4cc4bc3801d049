"""
fetch_user.py - fetch one user from a running provider with the current token

Usage:
  python fetch_user.py --base http://localhost:8080 --id 10
"""
import argparse
import logging
import sys
from typing import Optional

import httpx

from auth.service import current_minute_token
from usersvc.client import ApiClient, ApiClientError
from usersvc.config import settings

log = logging.getLogger("usersvc.fetch_user")


def run(base_url: str, user_id: int, token: Optional[str] = None, http_client: Optional[httpx.Client] = None) -> int:
    with ApiClient(base_url, http_client=http_client) as client:
        try:
            user = client.with_token(current_minute_token() if token is None else token).get_user(user_id)
        except ApiClientError as exc:
            log.error("Fetching user %s failed: %s", user_id, exc)
            return 1
    print(user.model_dump_json(by_alias=True))
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default=settings.BASE_URL)
    parser.add_argument("--id", dest="user_id", type=int, default=10)
    parser.add_argument("--token", default=None, help="Override the current-minute token")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL)
    return run(args.base, args.user_id, token=args.token)


if __name__ == "__main__":
    sys.exit(main())
