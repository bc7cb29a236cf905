"""ID allocation for stored records.

Records get sequential integer IDs: the next ID is the highest ID the store
currently holds, plus one. An empty collection starts at 1.

INVARIANT: IDs are permanent. Once assigned, an ID never changes.
"""

from __future__ import annotations

FIRST_ID = 1


def next_id(last_id: int) -> int:
    """Return the ID to assign after *last_id* (0 means the collection is empty).

    Raises:
        ValueError: If *last_id* is negative.
    """
    if last_id < 0:
        msg = f"Invalid last ID: {last_id}. Stores report 0 when empty."
        raise ValueError(msg)
    return last_id + FIRST_ID
