"""Generation and conversion of musical note-based identifiers.

An identifier has two parts joined by a separator: a run of solfège
syllables (base 7) followed by a run of duodecimal characters (base 12).
Every identifier maps to a unique position in sequential order.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

__all__ = [
    "Config",
    "Generator",
    "default_config",
    "new_with_defaults",
]

JUST_INTONATION_NOTES: tuple[str, ...] = ("do", "re", "mi", "fa", "so", "la", "ti")
EQUAL_TEMPERAMENT_CHARS: str = "0123456789ab"

_NOTE_INDEX = {note: index for index, note in enumerate(JUST_INTONATION_NOTES)}
_CHAR_INDEX = {char: index for index, char in enumerate(EQUAL_TEMPERAMENT_CHARS)}


@dataclass(frozen=True)
class Config:
    """Shape of the identifiers a generator produces."""

    just_intonation_digits: int = 4
    equal_temperament_digits: int = 5
    separator: str = "-"


def default_config() -> Config:
    """Return the default configuration: 4 notes, 5 characters, '-'."""
    return Config()


def new_with_defaults() -> Generator:
    """Create a generator with the default configuration."""
    return Generator(default_config())


def _digits(value: int, base: int, width: int) -> list[int]:
    """Return the lowest ``width`` digits of ``value`` in ``base``, most significant first."""
    digits = []
    for _ in range(width):
        value, digit = divmod(value, base)
        digits.append(digit)
    digits.reverse()
    return digits


class Generator:
    """Produces random and sequential note-based identifiers."""

    def __init__(self, config: Config | None = None) -> None:
        config = config if config is not None else default_config()
        self.just_intonation_digits = config.just_intonation_digits
        self.equal_temperament_digits = config.equal_temperament_digits
        self.separator = config.separator
        self._rng = random.Random()

    @property
    def _equal_max(self) -> int:
        return len(EQUAL_TEMPERAMENT_CHARS) ** self.equal_temperament_digits

    def new_id(self) -> str:
        """Return a random identifier."""
        notes = "".join(
            self._rng.choice(JUST_INTONATION_NOTES)
            for _ in range(self.just_intonation_digits)
        )
        chars = "".join(
            self._rng.choice(EQUAL_TEMPERAMENT_CHARS)
            for _ in range(self.equal_temperament_digits)
        )
        return f"{notes}{self.separator}{chars}"

    def batch_generate_random_ids(self, count: int) -> list[str]:
        """Return ``count`` distinct random identifiers.

        An empty list is returned when ``count`` is not positive or exceeds
        the number of possible identifiers.
        """
        if count <= 0:
            return []
        limit = self.max_combinations()
        if count > limit:
            return []
        return [self.position_to_id(pos) for pos in self.random_sample(limit, count)]

    def random_sample(self, limit: int, count: int) -> list[int]:
        """Return ``count`` distinct random integers from ``range(limit)``.

        When ``count`` reaches ``limit`` the whole range is returned shuffled.
        """
        if count >= limit:
            positions = list(range(limit))
            self._rng.shuffle(positions)
            return positions
        return self._rng.sample(range(limit), count)

    def max_combinations(self) -> int:
        """Return how many distinct identifiers the configuration allows."""
        just_max = len(JUST_INTONATION_NOTES) ** self.just_intonation_digits
        return just_max * self._equal_max

    def batch_generate_ids(self, count: int, start_position: int) -> list[str]:
        """Return sequential identifiers starting at ``start_position``.

        The batch is cut short at the last valid position; invalid arguments
        yield an empty list.
        """
        if count <= 0 or start_position < 0:
            return []
        limit = self.max_combinations()
        if start_position >= limit:
            return []
        end = min(start_position + count, limit)
        return [self.position_to_id(pos) for pos in range(start_position, end)]

    def id_to_position(self, id_string: str) -> int:
        """Return the 0-based sequential position of ``id_string``.

        Raises ValueError if the identifier is not well formed.
        """
        if not self.separator:
            raise ValueError("identifiers cannot be parsed without a separator")
        parts = id_string.split(self.separator)
        if len(parts) != 2:
            raise ValueError(f"invalid identifier format: {id_string!r}")
        just_part, equal_part = parts
        if (
            len(just_part) != self.just_intonation_digits * 2
            or len(equal_part) != self.equal_temperament_digits
        ):
            raise ValueError(f"invalid identifier length: {id_string!r}")

        just_value = 0
        for start in range(0, len(just_part), 2):
            note = just_part[start:start + 2]
            try:
                index = _NOTE_INDEX[note]
            except KeyError:
                raise ValueError(f"invalid note {note!r} in {id_string!r}") from None
            just_value = just_value * len(JUST_INTONATION_NOTES) + index

        equal_value = 0
        for char in equal_part:
            try:
                index = _CHAR_INDEX[char]
            except KeyError:
                raise ValueError(f"invalid character {char!r} in {id_string!r}") from None
            equal_value = equal_value * len(EQUAL_TEMPERAMENT_CHARS) + index

        return just_value * self._equal_max + equal_value

    def position_to_id(self, position: int) -> str:
        """Return the identifier at the 0-based sequential ``position``.

        Raises ValueError if ``position`` is negative.
        """
        if position < 0:
            raise ValueError(f"position must not be negative: {position}")
        just_value, equal_value = divmod(position, self._equal_max)
        notes = "".join(
            JUST_INTONATION_NOTES[digit]
            for digit in _digits(
                just_value, len(JUST_INTONATION_NOTES), self.just_intonation_digits
            )
        )
        chars = "".join(
            EQUAL_TEMPERAMENT_CHARS[digit]
            for digit in _digits(
                equal_value, len(EQUAL_TEMPERAMENT_CHARS), self.equal_temperament_digits
            )
        )
        return f"{notes}{self.separator}{chars}"