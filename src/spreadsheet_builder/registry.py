import logging
from typing import Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from spreadsheet_builder import __name__ as spreadsheet_builder_name

logger = logging.getLogger(spreadsheet_builder_name)
debug = logger.debug

__all__ = ["Registry", "SharedStringTable"]

T = TypeVar("T")


class Registry(Generic[T]):
    """An append-only store that assigns each registered definition an ID.

    IDs are assigned sequentially from ``first_id`` and are never reused or
    renumbered. Registering a definition equal to an existing one mints a
    new ID; callers that want to share a definition should keep its ID.

    .. code-block:: python

        fonts = Registry("font")
        bold_id = fonts.register(Font(bold=True), name="bold")
        assert fonts.lookup("bold") == bold_id

    Parameters
    ----------
    kind: str
        The kind of resource, used in messages.
    first_id: int, optional, default: 0
        The ID assigned to the first registered definition.
    """

    def __init__(self, kind: str, first_id: int = 0) -> None:
        self.kind = kind
        self.first_id = first_id
        self._definitions: List[T] = []
        self._names: Dict[Hashable, int] = {}

    def register(self, definition: T, name: Optional[Hashable] = None) -> int:
        """Add a definition and return its new ID.

        Parameters
        ----------
        definition:
            The resource definition.
        name: optional
            A key such as a standard style enum that can later be passed to
            :py:meth:`lookup`.

        Raises
        ------
        TypeError:
            If ``definition`` is ``None``.
        IndexError:
            If ``name`` is already registered.
        """
        if definition is None:
            msg = f"{self.kind} definition cannot be None"
            raise TypeError(msg)
        if name is not None and name in self._names:
            raise IndexError(f"{self.kind} '{name}' already registered")

        new_id = self.next_id
        self._definitions.append(definition)
        if name is not None:
            self._names[name] = new_id
        debug("register %s: id=%d, name=%s", self.kind, new_id, name)
        return new_id

    @property
    def next_id(self) -> int:
        """int: The ID the next registered definition will receive."""
        return self.first_id + len(self._definitions)

    def lookup(self, name: Hashable) -> Optional[int]:
        """Return the ID registered under ``name`` or ``None``."""
        return self._names.get(name)

    def get(self, id: int) -> Optional[T]:
        """Return the definition with ID ``id`` or ``None``."""
        if id in self:
            return self._definitions[id - self.first_id]
        return None

    def __getitem__(self, id: int) -> T:
        if not isinstance(id, int):
            t = type(id).__name__
            raise LookupError(f"invalid index type {t}")
        if id not in self:
            raise IndexError(f"{self.kind} {id} out of range")
        return self._definitions[id - self.first_id]

    def __contains__(self, id) -> bool:
        return isinstance(id, int) and self.first_id <= id < self.next_id

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[Tuple[int, T]]:
        return enumerate(self._definitions, start=self.first_id)


class SharedStringTable:
    """De-duplicated text referenced by cells using the index of the string.

    Adding a string equal to one already in the table returns the existing
    index.
    """

    def __init__(self) -> None:
        self._strings: List[str] = []
        self._index: Dict[str, int] = {}

    def add(self, text: str) -> int:
        """Return the index of ``text``, appending it if it is not in the table.

        Raises
        ------
        TypeError:
            If ``text`` is not a string.
        """
        if not isinstance(text, str):
            msg = "shared string must be a string"
            raise TypeError(msg)

        string_id = self._index.get(text)
        if string_id is None:
            string_id = len(self._strings)
            self._strings.append(text)
            self._index[text] = string_id
        return string_id

    def get(self, string_id: int) -> Optional[str]:
        """Return the string with index ``string_id`` or ``None``."""
        if isinstance(string_id, int) and 0 <= string_id < len(self._strings):
            return self._strings[string_id]
        return None

    def __contains__(self, text) -> bool:
        return text in self._index

    def __len__(self) -> int:
        return len(self._strings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._strings)
