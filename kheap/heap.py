from collections.abc import Sequence
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from kheap.config import HeapConfig
from kheap.errors import EmptyHeapError
from kheap.logger import init_logger
from kheap.types import HeapType
from kheap.utils import heap as heap_ops

logger = init_logger(__name__)

T = TypeVar("T")


class HeapView(Sequence):
    """Read-only window onto a heap's backing list. Nothing is copied."""

    def __init__(self, data: List):
        self._data = data

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"HeapView({self._data!r})"


class Heap(Generic[T]):
    """A complete k-ary tree stored in a single list.

    ``heap_type`` decides whether the root holds the smallest (MIN) or the
    largest (MAX) element and ``branching_factor`` is the number of children
    per node. Both are fixed for the life of the heap.
    """

    def __init__(
        self,
        iterable: Iterable[T] = (),
        heap_type: HeapType = HeapType.MIN,
        branching_factor: int = 2,
        key: Optional[Callable[[T], Any]] = None,
    ):
        config = HeapConfig(heap_type=heap_type, branching_factor=branching_factor)
        self._heap_type = config.get_type()
        self._branching_factor = config.branching_factor
        self._key = key
        self._heap: List[T] = list(iterable)
        if self._heap:
            heap_ops.heapify(self._heap, self._heap_type, self._branching_factor, self._key)
        logger.debug(
            f"Created {self._heap_type} heap with branching factor {self._branching_factor} and {len(self._heap)} elements"
        )

    @classmethod
    def from_config(cls, config: HeapConfig, iterable: Iterable[T] = (), key=None):
        return cls(iterable, config.get_type(), config.branching_factor, key)

    @property
    def heap_type(self) -> HeapType:
        return self._heap_type

    @property
    def branching_factor(self) -> int:
        return self._branching_factor

    @property
    def view(self) -> HeapView:
        return HeapView(self._heap)

    def as_mutable_list(self) -> List[T]:
        """Returns the backing list itself.

        Callers that reorder or change elements through it must call
        ``rebuild`` before using the heap again.
        """
        return self._heap

    def rebuild(self) -> None:
        heap_ops.heapify(self._heap, self._heap_type, self._branching_factor, self._key)

    def insert(self, element: T) -> int:
        return heap_ops.insert(
            self._heap, element, self._heap_type, self._branching_factor, self._key
        )

    def peek(self) -> T:
        if not self._heap:
            raise EmptyHeapError("Can not peek into an empty heap.")
        return self._heap[0]

    def top(self) -> T:
        return self.remove(0)

    def extract(self) -> Optional[T]:
        return heap_ops.extract(
            self._heap, self._heap_type, self._branching_factor, self._key
        )

    def remove(self, index: int) -> T:
        try:
            return heap_ops.remove(
                self._heap, index, self._heap_type, self._branching_factor, self._key
            )
        except IndexError as e:
            logger.debug(f"remove({index}) failed on heap of length {len(self._heap)}: {e}")
            raise

    def update(self, index: int, mutator: Callable[[T], Optional[T]]) -> int:
        try:
            return heap_ops.update(
                self._heap,
                index,
                mutator,
                self._heap_type,
                self._branching_factor,
                self._key,
            )
        except IndexError as e:
            logger.debug(f"update({index}) failed on heap of length {len(self._heap)}: {e}")
            raise

    def replace(self, index: int, element: T) -> T:
        return heap_ops.replace(
            self._heap, index, element, self._heap_type, self._branching_factor, self._key
        )

    def find(self, element: T) -> Optional[int]:
        return heap_ops.find(self._heap, element)

    def is_valid(self) -> bool:
        return heap_ops.is_valid(
            self._heap, self._heap_type, self._branching_factor, self._key
        )

    def clear(self) -> None:
        self._heap.clear()

    def is_empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[T]:
        return iter(self._heap)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._heap!r}, heap_type={self._heap_type}, "
            f"branching_factor={self._branching_factor})"
        )


class MinHeap(Heap[T]):
    def __init__(self, iterable: Iterable[T] = (), branching_factor: int = 2, key=None):
        super().__init__(iterable, HeapType.MIN, branching_factor, key)


class MaxHeap(Heap[T]):
    def __init__(self, iterable: Iterable[T] = (), branching_factor: int = 2, key=None):
        super().__init__(iterable, HeapType.MAX, branching_factor, key)
