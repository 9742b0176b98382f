"""
Achievement record and its on-disk line format.

One achievement is saved as one line of five ``|``-separated fields::

    id|name|description|data_type|data

Fields are written verbatim; there is no escaping.  A field containing the
delimiter or a line break cannot be read back, so such records are refused
by the store before they reach the file (see ``AchievementStore.unlock``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rekompenco.core.constants import FIELD_COUNT, FIELD_DELIMITER, MAX_DATA_TYPE
from rekompenco.core.exceptions import MalformedFileError, RecordFormatError


@dataclass(frozen=True, eq=False)
class Achievement:
    """
    An immutable achievement.

    Identity is the ``id`` alone: two achievements with the same id compare
    equal and hash alike whatever their other fields hold.  Construction does
    not validate anything, not even an empty id.
    """

    id: str
    name: str
    description: str = ""
    data_type: int = 0  # unsigned 16-bit tag describing ``data``
    data: str = field(default="", repr=False)  # opaque payload, usually base64 image data

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Achievement):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_saved_format(self) -> str:
        """Return the single line this achievement is saved as (no terminator)."""
        return FIELD_DELIMITER.join(
            (self.id, self.name, self.description, str(self.data_type), self.data)
        )

    def encoded_size(self) -> int:
        """Return the UTF-8 byte length of the saved line.

        Raises UnicodeEncodeError for fields holding lone surrogates.
        """
        return len(self.to_saved_format().encode("utf-8"))

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "data_type": self.data_type,
            "data": self.data,
        }

    @classmethod
    def from_saved_format(
        cls, line: str, path: Path | None = None, line_number: int | None = None
    ) -> Achievement:
        """
        Parse one saved line (without its terminator).

        ``path`` and ``line_number`` only label the error.

        Raises:
            MalformedFileError: if the line does not have exactly five fields.
            RecordFormatError: if the data type is not an integer in 0-65535.
        """
        parts = line.split(FIELD_DELIMITER)
        if len(parts) != FIELD_COUNT:
            raise MalformedFileError(path, line_number, len(parts))
        try:
            data_type = parse_data_type(parts[3])
        except RecordFormatError as exc:
            raise RecordFormatError(exc.value, path, line_number) from exc
        return cls(
            id=parts[0],
            name=parts[1],
            description=parts[2],
            data_type=data_type,
            data=parts[4],
        )


def parse_data_type(text: str) -> int:
    """Parse an unsigned 16-bit decimal integer, tolerating surrounding whitespace and a '+'."""
    digits = text.strip()
    if digits.startswith("+"):
        digits = digits[1:]
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise RecordFormatError(text)
    value = int(digits)
    if value > MAX_DATA_TYPE:
        raise RecordFormatError(text)
    return value


def is_valid_data_type(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_DATA_TYPE
