"""Bordered greeting box renderer."""

from snowcard.models import DEFAULT_MESSAGE, DEFAULT_YEAR, WIDTH, GreetingFields


def center_pad(text: str, width: int = WIDTH) -> str:
    """Center ``text`` in a field of ``width`` spaces.

    Text longer than ``width`` is returned unchanged: no left padding and no
    truncation, so the box border will not line up for that line.
    """
    left = max(0, (width - len(text)) // 2)
    return (" " * left + text).ljust(width)


def _border(width: int) -> str:
    return "+" + "-" * (width + 2) + "+"


def _boxed(text: str, width: int) -> str:
    return f"| {center_pad(text, width)} |"


def render_greeting_box(
    recipient: str, message: str, sender: str, year: str, width: int = WIDTH
) -> tuple[str, ...]:
    """Render the greeting card header.

    Args:
        recipient: Shown as "To: ..." when non-empty.
        message: Custom message; the default wish is used when empty.
        sender: Shown as "From: ..." when non-empty.
        year: Appended to the title; the default year is used when empty.
        width: Interior width of the box.

    Returns:
        Box lines, top border to bottom border.
    """
    blank = "| " + " " * width + " |"
    lines = [
        _border(width),
        _boxed(f"MERRY CHRISTMAS {year or DEFAULT_YEAR}", width),
        blank,
    ]
    if recipient:
        lines.append(_boxed(f"To: {recipient}", width))
    lines.append(_boxed(message or DEFAULT_MESSAGE, width))
    if sender:
        lines.append(_boxed(f"From: {sender}", width))
    lines += [blank, _border(width)]
    return tuple(lines)


def render_greeting(fields: GreetingFields) -> tuple[str, ...]:
    """Render the greeting box for a GreetingFields."""
    return render_greeting_box(
        recipient=fields.recipient,
        message=fields.message,
        sender=fields.sender,
        year=fields.year,
    )
