from __future__ import annotations

from collections.abc import Hashable, Iterator

from .structure import ensure_node_key

__all__ = ["IdentifierRegistry"]


class IdentifierRegistry:
    """
    Bidirectional mapping between node objects and positive integer ids.

    Ids are handed out from 1 upward in insertion order. The registry owns
    the only copy of each object; backends reference nodes by id.

    Parameters
    ----------
    compact : bool, optional
        Removal discipline. With ``False`` (default) a removed id becomes a
        permanent gap and every other id stays stable. With ``True`` the slot
        is deleted and every larger id shifts down by one, keeping ids dense
        (``1..len(registry)``) at O(n) removal cost.

    Notes
    -----
    - ``obj_to_id`` and ``id_to_obj`` always describe the same set of live
      objects; slot ``i`` of ``id_to_obj`` holds the object with id ``i + 1``
      or ``None`` for a gap.
    """

    def __init__(self, compact: bool = False):
        self.compact = bool(compact)
        self.obj_to_id = {}   # obj -> id
        self.id_to_obj = []   # id - 1 -> obj | None

    def __len__(self) -> int:
        return len(self.obj_to_id)

    def __iter__(self) -> Iterator:
        return iter(self.obj_to_id)

    def __contains__(self, obj) -> bool:
        return self.contains_obj(obj)

    def __repr__(self) -> str:
        mode = "compact" if self.compact else "sparse"
        return f"<IdentifierRegistry | live={len(self)} · slots={len(self.id_to_obj)} · {mode}>"

    # Mutation

    def insert(self, obj) -> int | None:
        """
        Register ``obj`` under a fresh id.

        Returns
        -------
        int or None
            The new id, or ``None`` if ``obj`` is already registered. A
            duplicate insert never refreshes the existing id.

        Raises
        ------
        TypeError
            If ``obj`` is ``None`` or unhashable.
        """
        ensure_node_key(obj)
        if obj in self.obj_to_id:
            return None
        self.id_to_obj.append(obj)
        new_id = len(self.id_to_obj)
        self.obj_to_id[obj] = new_id
        return new_id

    def remove(self, id_: int):
        """
        Remove the object registered under ``id_``.

        Returns
        -------
        object or None
            The removed object, or ``None`` if the id is unknown or already
            removed.
        """
        obj = self.get_by_id(id_)
        if obj is None:
            return None
        del self.obj_to_id[obj]
        slot = id_ - 1
        if not self.compact:
            self.id_to_obj[slot] = None
            return obj

        # Compacting removal: drop the slot and shift every larger id down
        del self.id_to_obj[slot]
        for other, other_id in self.obj_to_id.items():
            if other_id > id_:
                self.obj_to_id[other] = other_id - 1
        return obj

    def clear(self):
        self.obj_to_id.clear()
        self.id_to_obj.clear()

    # Lookup

    def get_by_id(self, id_: int):
        if isinstance(id_, bool) or not isinstance(id_, int):
            return None
        if id_ < 1 or id_ > len(self.id_to_obj):
            return None
        return self.id_to_obj[id_ - 1]

    def get_by_obj(self, obj) -> int | None:
        if obj is None or not isinstance(obj, Hashable):
            return None
        try:
            return self.obj_to_id.get(obj)
        except TypeError:
            # hashable container with unhashable contents
            return None

    def contains_id(self, id_: int) -> bool:
        return self.get_by_id(id_) is not None

    def contains_obj(self, obj) -> bool:
        return self.get_by_obj(obj) is not None

    def items(self) -> Iterator[tuple[int, object]]:
        """Live ``(id, obj)`` pairs, in no particular order."""
        return ((id_, obj) for obj, id_ in self.obj_to_id.items())
