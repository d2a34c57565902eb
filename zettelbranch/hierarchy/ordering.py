"""Total ordering over Zettel identifiers."""

import re
from functools import cmp_to_key
from typing import Iterable

# Letter runs, digit runs and any other run (dots) become separate tokens, so
# "5301.10" compares as 5301 . 10 and sorts after "5301.2".
_ORDER_TOKEN_RE = re.compile(r"[a-zA-Z]+|[0-9]+|[^a-zA-Z0-9]+")


def _order_tokens(zettel_id: str) -> list[str]:
    return _ORDER_TOKEN_RE.findall(zettel_id)


def _is_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


def compare_zettel_ids(a: str, b: str) -> int:
    """Compare two identifiers token by token.

    Digit tokens compare numerically, everything else as strings. A missing
    trailing token counts as the empty string, so "5301" sorts before "5301.1".

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal
    """
    tokens_a = _order_tokens(a)
    tokens_b = _order_tokens(b)

    for i in range(max(len(tokens_a), len(tokens_b))):
        part_a = tokens_a[i] if i < len(tokens_a) else ""
        part_b = tokens_b[i] if i < len(tokens_b) else ""
        if part_a == part_b:
            continue

        if _is_number(part_a) and _is_number(part_b):
            diff = int(part_a) - int(part_b)
            if diff:
                return diff
            # Same number with different zero padding
            continue

        return -1 if part_a < part_b else 1

    return 0


zettel_sort_key = cmp_to_key(compare_zettel_ids)


def sort_zettel_ids(zettel_ids: Iterable[str]) -> list[str]:
    """Sort identifiers in Zettelkasten order."""
    return sorted(zettel_ids, key=zettel_sort_key)
