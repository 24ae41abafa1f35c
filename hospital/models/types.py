from __future__ import annotations

from typing import Any

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.types import TypeDecorator

NOTE_SEPARATOR = ";"


def encode_notes(notes: list[str] | None) -> str:
    return NOTE_SEPARATOR.join(notes or [])


def decode_notes(value: str | None) -> list[str]:
    if not value:
        return []
    return [segment for segment in value.split(NOTE_SEPARATOR) if segment]


class NoteList(TypeDecorator):
    """Ordered list of strings stored as one ``;``-joined text column.

    Lossy: a note containing ``;`` comes back as several notes, and empty
    notes are dropped on load.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[str] | None, dialect: Dialect) -> str:
        return encode_notes(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> list[str]:
        return decode_notes(value)


# Appends on the mapped list mark the owning row dirty.
TrackedNoteList = MutableList.as_mutable(NoteList)
