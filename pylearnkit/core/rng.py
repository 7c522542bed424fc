"""
Seeded random number generation.

Every stochastic estimator owns one numpy Generator created from an
explicit integer seed. Sub-computations that may run in any order (one
ensemble member, one restart) get a forked child generator whose seed is
drawn from the parent up front, in index order.

Usage:
    rng = check_random_state(42)
    noise = rand_normal((100, 3), rng, mu=0.0, sigma=0.5)
    children = fork_rng(rng, n_children=10)
"""

from __future__ import annotations

import copy
from typing import Any

import numpy as np
from numpy.typing import NDArray

# Upper bound (exclusive) of seeds drawn for child generators
SEED_MAX = np.iinfo(np.int32).max

Shape = int | tuple[int, ...]


def resolve_seed(seed: int | None) -> int:
    """
    Return an explicit integer seed.

    A None seed is replaced once by a value drawn from OS entropy, so the
    caller can record it and replay the stream later.

    Args:
        seed: Caller-supplied seed or None

    Returns:
        Non-negative integer seed
    """
    if seed is None:
        return int(np.random.SeedSequence().generate_state(1)[0])
    return int(seed)


def check_random_state(seed: int | np.random.Generator | None) -> np.random.Generator:
    """
    Turn a seed into a Generator.

    Args:
        seed: None, an integer seed, or an existing Generator (returned as is)

    Returns:
        numpy.random.Generator
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(resolve_seed(seed))


def duplicate_rng(rng: np.random.Generator) -> np.random.Generator:
    """
    Copy a generator, state included.

    The copy replays exactly the draws the original would make next,
    without advancing the original.
    """
    return copy.deepcopy(rng)


def fork_rng(rng: np.random.Generator, n_children: int) -> list[np.random.Generator]:
    """
    Create independent, reproducible child generators.

    Child seeds are drawn from the parent in index order before any child
    is used, so child i is the same no matter how or where the children
    are later consumed.

    Args:
        rng: Parent generator (advanced by n_children draws)
        n_children: Number of children

    Returns:
        List of n_children Generators
    """
    seeds = rng.integers(0, SEED_MAX, size=n_children)
    return [np.random.default_rng(int(s)) for s in seeds]


def rand_uniform(shape: Shape, rng: np.random.Generator) -> NDArray[np.float64]:
    """Draw independent uniform values in [0, 1)."""
    return rng.random(shape)


def rand_normal(
    shape: Shape,
    rng: np.random.Generator,
    mu: float = 0.0,
    sigma: float = 1.0,
) -> NDArray[np.float64]:
    """
    Draw normal values with the Box-Muller transform.

        z = sqrt(-2 ln(u1)) * sin(2 pi u2) * sigma + mu

    where u1 and u2 are two consecutive blocks of rand_uniform draws.
    The output stream is therefore fully determined by the generator state.
    """
    a = rand_uniform(shape, rng)
    b = rand_uniform(shape, rng)
    return (np.sqrt(np.log(a) * -2.0) * np.sin(b * 2.0 * np.pi)) * sigma + mu


def rng_state(rng: np.random.Generator) -> dict[str, Any]:
    """Snapshot a generator's bit generator state as plain data."""
    return copy.deepcopy(rng.bit_generator.state)


def rng_from_state(state: dict[str, Any]) -> np.random.Generator:
    """
    Rebuild a generator from a snapshot taken by rng_state().

    Raises:
        ValueError: If the snapshot names an unknown bit generator
    """
    name = state['bit_generator']
    bit_generator_cls = getattr(np.random, name, None)
    if bit_generator_cls is None:
        raise ValueError(f"Unknown bit generator in state: {name!r}")
    bit_generator = bit_generator_cls()
    bit_generator.state = copy.deepcopy(state)
    return np.random.Generator(bit_generator)
