from kheap.config import HeapConfig
from kheap.errors import EmptyHeapError, HeapError, InvalidIndexError
from kheap.heap import Heap, HeapView, MaxHeap, MinHeap
from kheap.types import ErrorKind, HeapType
from kheap.utils.heap import (
    extract,
    find,
    heap_sort,
    heapify,
    insert,
    is_valid,
    remove,
    replace,
    sift_down,
    sift_up,
    update,
)

__version__ = "0.1.0"

__all__ = [
    "HeapConfig",
    "EmptyHeapError",
    "HeapError",
    "InvalidIndexError",
    "Heap",
    "HeapView",
    "MaxHeap",
    "MinHeap",
    "ErrorKind",
    "HeapType",
    "extract",
    "find",
    "heap_sort",
    "heapify",
    "insert",
    "is_valid",
    "remove",
    "replace",
    "sift_down",
    "sift_up",
    "update",
]
