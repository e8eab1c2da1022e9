from typing import Generic, Iterator, List, Optional, TypeVar

__all__ = ["ItemsList"]

T = TypeVar("T")


class ItemsList(Generic[T]):
    """An ordered list of named items indexed by position or by name.

    Names are matched case-insensitively.
    """

    def __init__(self, item_name: str, items: Optional[List[T]] = None):
        self._item_name = item_name
        self._items: List[T] = [] if items is None else list(items)

    def __getitem__(self, key):
        if isinstance(key, int):
            if key < 0:
                key += len(self._items)
            if not 0 <= key < len(self._items):
                raise IndexError(f"index {key} out of range")
            return self._items[key]
        elif isinstance(key, str):
            item = self.get(key)
            if item is None:
                raise KeyError(f"no {self._item_name} named '{key}'")
            return item
        else:
            t = type(key).__name__
            raise LookupError(f"invalid index type {t}")

    def get(self, name: str) -> Optional[T]:
        """Return the item called ``name`` or ``None``."""
        if not isinstance(name, str):
            return None
        name = name.lower()
        for item in self._items:
            if item.name.lower() == name:
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, key) -> bool:
        return self.get(key) is not None

    def append(self, item: T) -> None:
        self._items.append(item)
