from datetime import datetime, timezone

from uuid_utils import uuid7


def new_id() -> str:
    return str(uuid7())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
