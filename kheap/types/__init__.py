from kheap.types.error_kind import ErrorKind
from kheap.types.heap_type import HeapType

__all__ = ["ErrorKind", "HeapType"]
