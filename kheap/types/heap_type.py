from kheap.types.base_int_enum import BaseIntEnum


class HeapType(BaseIntEnum):
    MIN = 1
    MAX = 2
