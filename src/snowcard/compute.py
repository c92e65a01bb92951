"""Snow computation layer — random source, snowflake placement, and card assembly."""

import logging
import time

import numpy as np

from snowcard.art import DEFAULT_FRAGMENTS
from snowcard.models import (
    HEIGHT,
    SNOWFLAKE_COUNT,
    WIDTH,
    CardData,
    Coordinate,
    GreetingFields,
)

logger = logging.getLogger(__name__)


def resolve_seed(seed: int | None = None) -> int:
    """Return ``seed`` unchanged, or a fresh one taken from the wall clock."""
    if seed is None:
        seed = time.time_ns()
    return seed


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random source for one run. Unseeded runs are seeded from the clock."""
    return np.random.default_rng(resolve_seed(seed))


def generate_snow(count: int, rng: np.random.Generator) -> tuple[Coordinate, ...]:
    """Draw ``count`` snowflake positions uniformly over the scene grid.

    Positions are unordered and may repeat. A negative count is the caller's
    error and is not checked here.

    Args:
        count: Number of flakes to generate.
        rng: Random source; its state advances.

    Returns:
        Tuple of exactly ``count`` coordinates.
    """
    columns = rng.integers(0, WIDTH, size=count)
    rows = rng.integers(0, HEIGHT, size=count)
    return tuple(Coordinate(column=int(c), row=int(r)) for c, r in zip(columns, rows))


def run(
    fields: GreetingFields,
    flake_count: int = SNOWFLAKE_COUNT,
    seed: int | None = None,
) -> CardData:
    """Top-level entry point: takes GreetingFields and returns a CardData.

    Args:
        fields: Greeting personalization.
        flake_count: Number of snowflakes to scatter.
        seed: Fixed seed for reproducible snow. None seeds from the clock.

    Returns:
        Fully computed CardData.
    """
    seed = resolve_seed(seed)
    logger.debug("Generating %d snowflakes with seed %d", flake_count, seed)
    snow = generate_snow(flake_count, make_rng(seed))
    return CardData(greeting=fields, snow=snow, fragments=DEFAULT_FRAGMENTS, seed=seed)
