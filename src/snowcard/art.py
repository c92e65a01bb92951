"""Hand-drawn scene fragments. Rows are scene row indices; texts are stamped as-is."""

from snowcard.models import ArtFragment

CHURCH = ArtFragment(
    name="church",
    column=4,
    width=11,
    rows=(
        (6, "    ++     "),  # cross
        (7, "    ||     "),  # steeple
        (8, "   /  \\    "),
        (9, "  /____\\   "),  # roof
        (10, "  | [] |   "),  # windows
        (11, "  | [] |   "),
        (12, "  | __ |   "),  # door
        (13, "  |____|   "),
    ),
)

TREE = ArtFragment(
    name="tree",
    column=40,
    width=10,
    rows=(
        (8, "    *     "),
        (9, "   /_\\    "),
        (10, "  /_/_\\   "),
        (11, " /_/_/_\\  "),
        (12, "/_/_/_/_\\ "),
        (13, "   /_\\    "),  # trunk
        (14, "   /_\\    "),
    ),
)

DEFAULT_FRAGMENTS: tuple[ArtFragment, ...] = (CHURCH, TREE)
