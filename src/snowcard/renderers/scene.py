"""Plain-text scene renderer: snow first, then art on top."""

import logging
from collections import defaultdict
from collections.abc import Iterable

from snowcard.art import DEFAULT_FRAGMENTS
from snowcard.canvas import CanvasBoundsError, CanvasRow
from snowcard.models import HEIGHT, WIDTH, ArtFragment, Coordinate

logger = logging.getLogger(__name__)


def compose_scene(
    snow: Iterable[Coordinate],
    fragments: Iterable[ArtFragment] = DEFAULT_FRAGMENTS,
) -> tuple[str, ...]:
    """Compose the winter scene as HEIGHT rows of WIDTH characters.

    Each row starts blank. Snowflakes on that row are placed only on cells
    that are still blank, then every fragment with text on that row is
    stamped over it, so art always wins over snow.

    Args:
        snow: Snowflake coordinates. Order only matters for duplicates.
        fragments: Art stamped in the given order.

    Returns:
        Tuple of scene rows, top to bottom.

    Raises:
        CanvasBoundsError: If a snowflake or fragment falls outside the grid.
    """
    fragments = tuple(fragments)
    flakes_by_row: dict[int, list[int]] = defaultdict(list)
    for flake in snow:
        if not 0 <= flake.row < HEIGHT:
            raise CanvasBoundsError(f"snowflake row {flake.row} outside [0, {HEIGHT})")
        flakes_by_row[flake.row].append(flake.column)

    rows: list[str] = []
    for r in range(HEIGHT):
        line = CanvasRow(WIDTH)
        for column in flakes_by_row.get(r, ()):
            line.sprinkle(column)
        for fragment in fragments:
            text = fragment.text_at(r)
            if text is not None:
                line.stamp(fragment.column, text)
                logger.debug("Stamped %s on row %d", fragment.name, r)
        rows.append(str(line))

    logger.debug("Composed %d rows", len(rows))
    return tuple(rows)
