"""Dense storage with stable ids and generation-checked references."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _SlotMetadata:
    rid: int
    op_id: int


@dataclass(frozen=True)
class ObjectSlot(Generic[T]):
    """An object together with its stable id."""

    id: int
    object: T


class IndexVector(Generic[T]):
    """Contiguous container whose elements keep stable ids across removals.

    Removed elements are swapped to the end of the live range; their ids are
    reused by later insertions. Each slot carries an operation id so that
    references can tell whether the object they point to is still there.
    """

    def __init__(self) -> None:
        self._data: List[Any] = []
        self._ids: List[int] = []
        self._metadata: List[_SlotMetadata] = []
        self._size = 0
        self._op_count = 0

    def append(self, obj: T) -> int:
        """Store ``obj`` and return its id."""
        slot_id, data_index = self._new_slot() if self.is_full() else self._free_slot()
        self._size += 1
        self._data[data_index] = obj
        return slot_id

    def _new_slot(self):
        self._data.append(None)
        self._ids.append(self._size)
        self._metadata.append(_SlotMetadata(self._size, self._op_count))
        self._op_count += 1
        return self._size, self._size

    def _free_slot(self):
        meta = self._metadata[self._size]
        meta.op_id = self._op_count
        self._op_count += 1
        return meta.rid, self._size

    def erase(self, id_: int) -> None:
        """Remove the object with this id; erasing twice does nothing."""
        data_index = self._ids[id_]
        if data_index >= self._size:
            return
        self._size -= 1
        last = self._size
        last_id = self._metadata[last].rid
        self._data[last], self._data[data_index] = self._data[data_index], self._data[last]
        self._metadata[last], self._metadata[data_index] = (
            self._metadata[data_index],
            self._metadata[last],
        )
        self._ids[last_id], self._ids[id_] = self._ids[id_], self._ids[last_id]
        self._op_count += 1
        self._metadata[last].op_id = self._op_count

    def remove_if(self, predicate: Callable[[T], bool]) -> None:
        data_index = 0
        while data_index < self._size:
            if predicate(self._data[data_index]):
                self.erase(self._metadata[data_index].rid)
            else:
                data_index += 1

    def __getitem__(self, id_: int) -> T:
        return self._data[self._ids[id_]]

    def __setitem__(self, id_: int, value: T) -> None:
        self._data[self._ids[id_]] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._data[: self._size])

    def __len__(self) -> int:
        return self._size

    def ref(self, id_: int) -> "Ref[T]":
        return Ref(id_, self, self._metadata[self._ids[id_]].op_id)

    def pref(self, id_: int, view: Optional[Callable[[T], Any]] = None) -> "PRef":
        """Reference whose ``get`` passes the object through ``view``."""
        return PRef(id_, self, self._metadata[self._ids[id_]].op_id, view)

    def data_at(self, index: int) -> T:
        return self._data[index]

    def slot_at(self, index: int) -> ObjectSlot[T]:
        return ObjectSlot(self._metadata[index].rid, self._data[index])

    def id_at(self, index: int) -> int:
        return self._metadata[index].rid

    def data_index(self, id_: int) -> int:
        return self._ids[id_]

    def is_valid(self, id_: int, validity: int) -> bool:
        return validity == self._metadata[self._ids[id_]].op_id

    def operation_id(self, id_: int) -> int:
        return self._metadata[self._ids[id_]].op_id

    def is_full(self) -> bool:
        return self._size == len(self._data)


@dataclass
class Ref(Generic[T]):
    """Reference to an element that knows whether it is still valid."""

    id: int = 0
    array: Optional[IndexVector] = None
    validity_id: int = 0

    def get(self) -> T:
        if self.array is None:
            raise LookupError("empty reference")
        return self.array[self.id]

    def __bool__(self) -> bool:
        return self.array is not None and self.array.is_valid(self.id, self.validity_id)


@dataclass
class PRef:
    """Reference that presents the element through a view function."""

    id: int = 0
    provider: Optional[IndexVector] = None
    validity_id: int = 0
    view: Optional[Callable[[Any], Any]] = None

    def get(self) -> Any:
        if self.provider is None:
            raise LookupError("empty reference")
        obj = self.provider[self.id]
        return obj if self.view is None else self.view(obj)

    def __bool__(self) -> bool:
        return self.provider is not None and self.provider.is_valid(self.id, self.validity_id)