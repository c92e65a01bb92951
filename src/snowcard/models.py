"""Card data model: greeting input, snow coordinates, art fragments, computed card."""

from dataclasses import dataclass

WIDTH = 60  # Scene and greeting box interior width (characters)
HEIGHT = 18  # Scene height (rows)
SNOWFLAKE_COUNT = 85  # Flakes generated per card
SNOW_GLYPH = "."
BLANK = " "
DEFAULT_YEAR = "2025"
DEFAULT_MESSAGE = "Wishing you a warm, cozy Christmas."


@dataclass(frozen=True)
class GreetingFields:
    """Personalization typed in by the user. Any field may be empty."""

    recipient: str
    sender: str
    message: str
    year: str = DEFAULT_YEAR

    @classmethod
    def from_input(
        cls, recipient: str = "", sender: str = "", message: str = "", year: str = ""
    ) -> "GreetingFields":
        """Build fields from raw input lines. An empty year becomes the default year."""
        return cls(
            recipient=recipient,
            sender=sender,
            message=message,
            year=year or DEFAULT_YEAR,
        )


@dataclass(frozen=True)
class Coordinate:
    """A single snowflake position on the scene grid."""

    column: int  # 0 <= column < WIDTH
    row: int  # 0 <= row < HEIGHT


@dataclass(frozen=True)
class ArtFragment:
    """A static drawing stamped onto the scene at a fixed column.

    ``rows`` maps a scene row index to the literal text drawn on that row.
    Every text is exactly ``width`` characters and the block must fit inside
    the grid; both are checked on construction.
    """

    name: str
    column: int  # Left edge of the block
    width: int  # Characters replaced per row
    rows: tuple[tuple[int, str], ...]  # (row index, literal text)

    def __post_init__(self) -> None:
        if self.column < 0 or self.column + self.width > WIDTH:
            raise ValueError(
                f"{self.name}: columns [{self.column}, {self.column + self.width}) "
                f"do not fit in width {WIDTH}"
            )
        for row, text in self.rows:
            if not 0 <= row < HEIGHT:
                raise ValueError(f"{self.name}: row {row} outside [0, {HEIGHT})")
            if len(text) != self.width:
                raise ValueError(
                    f"{self.name}: row {row} is {len(text)} chars, "
                    f"expected {self.width}"
                )

    def text_at(self, row: int) -> str | None:
        """Return the text drawn on ``row``, or None if the fragment skips that row."""
        for r, text in self.rows:
            if r == row:
                return text
        return None


@dataclass(frozen=True)
class CardData:
    """A finished card ready to print, plus the seed that scattered its snow."""

    greeting: GreetingFields
    snow: tuple[Coordinate, ...]  # Unordered, duplicates allowed
    fragments: tuple[ArtFragment, ...]  # Stamped in order, after snow
    seed: int  # Seed that produced the snow (for reproducing a card)
