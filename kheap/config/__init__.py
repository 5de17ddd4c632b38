from kheap.config.config import HeapConfig

__all__ = ["HeapConfig"]
