"""
UUID7 identifiers.

uuid_utils generates time-ordered UUID7 values; the compat variant returns
stdlib ``uuid.UUID`` instances so they flow through SQLAlchemy's ``Uuid`` type,
pydantic and FastAPI path parameters without conversion.
"""

from uuid import UUID

from uuid_utils.compat import uuid7


def new_uuid7() -> UUID:
    return uuid7()
