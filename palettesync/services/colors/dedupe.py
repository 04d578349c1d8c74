"""Greedy near-duplicate suppression for ranked color lists."""

from typing import List, Sequence, Tuple

from .model import color_distance

RGB = Tuple[int, int, int]


def remove_duplicates(colors: Sequence[RGB], threshold: float = 50) -> List[RGB]:
    """
    Drop colors closer than ``threshold`` (Euclidean RGB) to an already kept color.

    Single pass in input order, so with a frequency-sorted input the more
    frequent of two near colors wins.
    """
    unique: List[RGB] = []
    for color in colors:
        if all(color_distance(color, kept) >= threshold for kept in unique):
            unique.append(tuple(color))
    return unique
