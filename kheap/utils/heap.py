"""Heap primitives over a plain Python list.

Position 0 is the root and the children of position ``i`` live at
``i * branching_factor + 1 .. i * branching_factor + branching_factor``.
Every function takes the ordering (``heap_type``), the branching factor and an
optional ``key`` callable; callers must pass the same values for every call on
the same list.
"""

from operator import gt, lt
from typing import Any, Callable, List, MutableSequence, Optional, Sequence

from kheap.errors import EmptyHeapError, InvalidIndexError
from kheap.logger import init_logger
from kheap.types import HeapType

logger = init_logger(__name__)

KeyFunc = Optional[Callable[[Any], Any]]


def _comparator(heap_type: HeapType, branching_factor: int, key: KeyFunc):
    if branching_factor < 2:
        raise ValueError(f"branching_factor must be at least 2, got {branching_factor}")
    op = lt if HeapType(heap_type) == HeapType.MIN else gt
    if key is None:
        return op
    return lambda a, b: op(key(a), key(b))


def _opposite(heap_type: HeapType) -> HeapType:
    return HeapType.MAX if HeapType(heap_type) == HeapType.MIN else HeapType.MIN


def _check_index(heap: Sequence, index: int) -> None:
    if len(heap) == 0:
        raise EmptyHeapError()
    if index < 0 or index >= len(heap):
        raise InvalidIndexError()


def _sift_down(heap, index, beats, branching_factor, length) -> int:
    while True:
        first_child = index * branching_factor + 1
        if first_child >= length:
            break
        # Only a strictly better child replaces the current winner, so ties
        # go to the leftmost child.
        winner = index
        for child in range(first_child, min(first_child + branching_factor, length)):
            if beats(heap[child], heap[winner]):
                winner = child
        if winner == index:
            break
        heap[index], heap[winner] = heap[winner], heap[index]
        index = winner
    return index


def _sift_up(heap, index, beats, branching_factor) -> int:
    while index > 0:
        parent = (index - 1) // branching_factor
        if not beats(heap[index], heap[parent]):
            break
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent
    return index


def _restore(heap, index, beats, branching_factor) -> int:
    # The element at index changed without a reference value to compare with,
    # so its parent decides the direction.
    if index > 0 and beats(heap[index], heap[(index - 1) // branching_factor]):
        return _sift_up(heap, index, beats, branching_factor)
    return _sift_down(heap, index, beats, branching_factor, len(heap))


def sift_down(
    heap: MutableSequence,
    index: int,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
    end: Optional[int] = None,
) -> int:
    """Moves the element at ``index`` towards the leaves until no child beats it.

    Only the prefix ``heap[:end]`` is considered when ``end`` is given.
    Returns the final position of the element.

    Raises ``IndexError`` if ``index`` is not a position inside the prefix.
    """
    beats = _comparator(heap_type, branching_factor, key)
    length = len(heap) if end is None else end
    if length > len(heap):
        raise IndexError(f"end {end} is beyond the heap length {len(heap)}")
    if index < 0 or index >= length:
        raise IndexError(f"sift_down index {index} out of range for length {length}")
    return _sift_down(heap, index, beats, branching_factor, length)


def sift_up(
    heap: MutableSequence,
    index: int,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> int:
    """Moves the element at ``index`` towards the root while it beats its parent.

    Returns the final position of the element.

    Raises ``IndexError`` if ``index`` is not a position in the heap.
    """
    beats = _comparator(heap_type, branching_factor, key)
    if index < 0 or index >= len(heap):
        raise IndexError(f"sift_up index {index} out of range for length {len(heap)}")
    return _sift_up(heap, index, beats, branching_factor)


def insert(
    heap: List,
    element: Any,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> int:
    beats = _comparator(heap_type, branching_factor, key)
    heap.append(element)
    return _sift_up(heap, len(heap) - 1, beats, branching_factor)


def remove(
    heap: List,
    index: int,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> Any:
    """Removes and returns the element at ``index``.

    The last element takes the freed position and is sifted up or down
    depending on how it compares with the removed element.

    Raises ``EmptyHeapError`` on an empty heap and ``InvalidIndexError`` when
    ``index`` is not a position in the heap. The heap is untouched on error.
    """
    beats = _comparator(heap_type, branching_factor, key)
    _check_index(heap, index)
    removed = heap[index]
    last = heap.pop()
    if index < len(heap):
        heap[index] = last
        if beats(last, removed):
            _sift_up(heap, index, beats, branching_factor)
        else:
            _sift_down(heap, index, beats, branching_factor, len(heap))
    return removed


def extract(
    heap: List,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> Optional[Any]:
    """Removes and returns the root, or ``None`` if the heap is empty."""
    if len(heap) == 0:
        return None
    return remove(heap, 0, heap_type, branching_factor, key)


def update(
    heap: MutableSequence,
    index: int,
    mutator: Callable[[Any], Any],
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> int:
    """Applies ``mutator`` to the element at ``index`` and restores the heap.

    A non-``None`` return value from ``mutator`` replaces the element; ``None``
    means the element was changed in place. Returns the element's new position.

    Raises ``EmptyHeapError`` or ``InvalidIndexError`` without calling
    ``mutator``.
    """
    beats = _comparator(heap_type, branching_factor, key)
    _check_index(heap, index)
    replacement = mutator(heap[index])
    if replacement is not None:
        heap[index] = replacement
    return _restore(heap, index, beats, branching_factor)


def replace(
    heap: MutableSequence,
    index: int,
    element: Any,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> Any:
    """Stores ``element`` at ``index`` and returns the element it replaced."""
    beats = _comparator(heap_type, branching_factor, key)
    _check_index(heap, index)
    old_element = heap[index]
    heap[index] = element
    if beats(element, old_element):
        _sift_up(heap, index, beats, branching_factor)
    else:
        _sift_down(heap, index, beats, branching_factor, len(heap))
    return old_element


def find(heap: Sequence, element: Any) -> Optional[int]:
    for index, candidate in enumerate(heap):
        if candidate == element:
            return index
    return None


def heapify(
    heap: MutableSequence,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> None:
    """Turns an arbitrary sequence into a heap in place, in O(n).

    Sifts down every internal position, from the parent of the last element
    back to the root.
    """
    beats = _comparator(heap_type, branching_factor, key)
    length = len(heap)
    for index in range((length - 2) // branching_factor, -1, -1):
        _sift_down(heap, index, beats, branching_factor, length)
    logger.debug(
        f"Heapified {length} elements as {heap_type} heap with branching factor {branching_factor}"
    )


def heap_sort(
    heap: MutableSequence,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> None:
    """Sorts ``heap`` in place: ascending for MIN, descending for MAX.

    The sequence is first arranged as a heap of the opposite ordering, so each
    root moved behind the shrinking live range lands in its final position.
    """
    reverse_type = _opposite(heap_type)
    beats = _comparator(reverse_type, branching_factor, key)
    heapify(heap, reverse_type, branching_factor, key)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, beats, branching_factor, end)
    logger.debug(f"Heap sorted {len(heap)} elements for {heap_type} ordering")


def is_valid(
    heap: Sequence,
    heap_type: HeapType = HeapType.MIN,
    branching_factor: int = 2,
    key: KeyFunc = None,
) -> bool:
    beats = _comparator(heap_type, branching_factor, key)
    return not any(
        beats(heap[index], heap[(index - 1) // branching_factor])
        for index in range(1, len(heap))
    )
