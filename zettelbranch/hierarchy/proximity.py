"""Selection of the siblings nearest to a focal identifier."""

from typing import Iterable

from .ordering import sort_zettel_ids


def get_closest_siblings(current_id: str, siblings: Iterable[str], max_branches: int) -> list[str]:
    """Pick a window of siblings centered on the current identifier.

    Siblings and the current identifier are sorted together, then the window
    grows alternately to the left (even steps) and right (odd steps) of the
    current identifier. Once one side runs out the other side keeps filling.

    Args:
        current_id: Identifier the window is centered on
        siblings: Candidate identifiers, in any order
        max_branches: Maximum number of siblings to return

    Returns:
        Up to max_branches siblings in sorted order, current_id excluded
    """
    candidates = [sibling for sibling in dict.fromkeys(siblings) if sibling != current_id]
    if not candidates:
        return []

    ordered = sort_zettel_ids([*candidates, current_id])
    current_index = ordered.index(current_id)

    left_index = current_index - 1
    right_index = current_index + 1
    left_picks: list[str] = []
    right_picks: list[str] = []

    for step in range(max_branches):
        has_left = left_index >= 0
        has_right = right_index < len(ordered)
        if not has_left and not has_right:
            break

        if has_left and (not has_right or step % 2 == 0):
            left_picks.append(ordered[left_index])
            left_index -= 1
        else:
            right_picks.append(ordered[right_index])
            right_index += 1

    return left_picks[::-1] + right_picks
