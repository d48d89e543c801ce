"""Drag-to-reorder over the ordered sound list.

Reordering is a pure function so it can be tested without any widget:
the grid asks for ``reorder(sounds, dragged, target)`` and the store
persists whatever comes back.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace

from soundsnacks.models.sound import Sound

logger = logging.getLogger(__name__)


def sort_by_order(sounds: Sequence[Sound]) -> list[Sound]:
    """Return ``sounds`` sorted by their order index (stable)."""
    return sorted(sounds, key=lambda s: s.order)


def renumber(sounds: Sequence[Sound]) -> list[Sound]:
    """Return a copy where each sound's order equals its 1-based position."""
    return [
        sound if sound.order == index else replace(sound, order=index)
        for index, sound in enumerate(sounds, start=1)
    ]


def reorder(sounds: Sequence[Sound], dragged_id: str, destination_id: str) -> list[Sound]:
    """Move the dragged sound to the destination's position.

    The dragged sound takes the destination's former index and the sounds
    in between shift by one. Every sound in the result is renumbered to
    ``1..N``.

    Args:
        sounds: Current list, already sorted by order.
        dragged_id: ID of the sound being dragged.
        destination_id: ID of the sound it was dropped on.

    Returns:
        The reordered list, or an unchanged copy if the ids are equal or
        either one is not in ``sounds``.
    """
    if dragged_id == destination_id:
        return list(sounds)

    ids = [s.id for s in sounds]
    if dragged_id not in ids or destination_id not in ids:
        logger.debug("Reorder ignored: %s -> %s not in current list", dragged_id, destination_id)
        return list(sounds)

    from_index = ids.index(dragged_id)
    to_index = ids.index(destination_id)

    result = list(sounds)
    dragged = result.pop(from_index)
    result.insert(to_index, dragged)
    return renumber(result)
