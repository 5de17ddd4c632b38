from kheap.types import ErrorKind


class HeapError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self._kind = kind
        self._message = message

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return f"{self._kind.description} {self._message}"


class EmptyHeapError(HeapError, IndexError):
    def __init__(self, message: str = "Can not remove elements from an empty heap."):
        super().__init__(ErrorKind.EMPTY_HEAP, message)


class InvalidIndexError(HeapError, IndexError):
    def __init__(self, message: str = "Index is beyond the end of the heap."):
        super().__init__(ErrorKind.INVALID_INDEX, message)
