"""A 128-bit GUID value parsed from the registry-style text form."""

from __future__ import annotations

import re
import uuid

_GUID_PATTERN = re.compile(
    r"^\{[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-"
    r"[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\}$"
)


class VkGuid:
    """A GUID. Built from text, a uuid.UUID, or freshly generated."""

    __slots__ = ("_value",)

    def __init__(self, text: str | None = None) -> None:
        if text is None:
            self._value = uuid.UUID(int=0)
            return
        if not text:
            raise ValueError("Invalid GUID format.")
        if not text.startswith("{"):
            text = "{" + text + "}"
        if not _GUID_PATTERN.match(text):
            raise ValueError("Invalid GUID format.")
        self._value = uuid.UUID(text[1:-1])

    @classmethod
    def generate(cls) -> "VkGuid":
        """Return a new random GUID."""
        return cls.from_uuid(uuid.uuid4())

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "VkGuid":
        """Wrap an existing uuid.UUID."""
        guid = cls()
        guid._value = value
        return guid

    @property
    def uuid(self) -> uuid.UUID:
        return self._value

    @property
    def data1(self) -> int:
        return self._value.time_low

    @property
    def data2(self) -> int:
        return self._value.time_mid

    @property
    def data3(self) -> int:
        return self._value.time_hi_version

    @property
    def data4(self) -> bytes:
        return self._value.bytes[8:]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VkGuid):
            return self._value == other._value
        if isinstance(other, uuid.UUID):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return "{" + str(self._value).upper() + "}"

    def __repr__(self) -> str:
        return f"VkGuid({str(self)!r})"