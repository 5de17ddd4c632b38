from dataclasses import dataclass, field

from kheap.types import HeapType


@dataclass
class HeapConfig:
    heap_type: HeapType = field(
        default=HeapType.MIN,
        metadata={"help": "Ordering direction, min (root is smallest) or max."},
    )
    branching_factor: int = field(
        default=2,
        metadata={"help": "Number of children per node, at least 2."},
    )

    def __post_init__(self):
        if isinstance(self.heap_type, str):
            self.heap_type = HeapType.from_str(self.heap_type)
        elif not isinstance(self.heap_type, HeapType):
            self.heap_type = HeapType(self.heap_type)
        if self.branching_factor < 2:
            raise ValueError(
                f"branching_factor must be at least 2, got {self.branching_factor}"
            )

    def get_type(self) -> HeapType:
        return self.heap_type
