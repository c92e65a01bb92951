"""Fixed-width character buffer used to compose one scene row."""

from snowcard.models import BLANK, SNOW_GLYPH, WIDTH


class CanvasBoundsError(ValueError):
    """Overlay write outside the row buffer."""


class CanvasRow:
    """A mutable row of ``width`` characters, initialized to blanks.

    Writes are bounds-checked; the row length never changes.
    """

    def __init__(self, width: int = WIDTH) -> None:
        self.width = width
        self._cells = [BLANK] * width

    def _check(self, offset: int, length: int) -> None:
        if offset < 0 or offset + length > self.width:
            raise CanvasBoundsError(
                f"write [{offset}, {offset + length}) outside row of width {self.width}"
            )

    def sprinkle(self, column: int, glyph: str = SNOW_GLYPH) -> bool:
        """Place ``glyph`` at ``column`` if that cell is still blank.

        Returns:
            True if the glyph was placed, False if the cell was already taken.

        Raises:
            CanvasBoundsError: If ``column`` is outside the row.
        """
        self._check(column, 1)
        if self._cells[column] != BLANK:
            return False
        self._cells[column] = glyph
        return True

    def stamp(self, offset: int, text: str) -> None:
        """Overwrite ``[offset, offset + len(text))`` with ``text`` unconditionally.

        Raises:
            CanvasBoundsError: If the text does not fit inside the row.
        """
        self._check(offset, len(text))
        self._cells[offset : offset + len(text)] = text

    def __str__(self) -> str:
        return "".join(self._cells)

    def __repr__(self) -> str:
        return f"CanvasRow({str(self)!r})"
