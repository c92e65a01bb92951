"""Full card renderer — greeting box followed by the scene."""

from snowcard.models import CardData
from snowcard.renderers.greeting import render_greeting
from snowcard.renderers.scene import compose_scene


def render_card(card: CardData) -> str:
    """Render CardData as plain text, one newline-terminated line per row.

    Args:
        card: Fully computed card data.

    Returns:
        The greeting box lines followed by the scene rows.
    """
    lines = render_greeting(card.greeting) + compose_scene(card.snow, card.fragments)
    return "".join(f"{line}\n" for line in lines)
