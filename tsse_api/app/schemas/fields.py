"""
Integer field types shared by the models.

SQLite stores integers as signed 64 bit values; anything outside that
range is rejected while the request is parsed.
"""

from typing import Annotated

from pydantic import Field

SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1

# Identifier sent in a payload; 0 means "not persisted yet".
EntityId = Annotated[int, Field(ge=0, le=SQLITE_INTEGER_MAX)]

StoredInt = Annotated[int, Field(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]
