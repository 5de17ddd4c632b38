from kheap.types.base_int_enum import BaseIntEnum


class ErrorKind(BaseIntEnum):
    INVALID_INDEX = 1
    EMPTY_HEAP = 2

    @property
    def description(self) -> str:
        if self is ErrorKind.INVALID_INDEX:
            return "Index out of bounds."
        return "Heap is empty."
