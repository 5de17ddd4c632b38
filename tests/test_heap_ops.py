import random
import unittest

from kheap.errors import EmptyHeapError, InvalidIndexError
from kheap.types import HeapType
from kheap.utils import heap as heap_ops


class TestSift(unittest.TestCase):
    def test_sift_up_moves_new_minimum_to_root(self):
        heap = [0, 2, 4, 6, 8, 10]
        heap.append(-1)
        position = heap_ops.sift_up(heap, len(heap) - 1)
        self.assertEqual(position, 0)
        self.assertEqual(heap[0], -1)
        self.assertTrue(heap_ops.is_valid(heap))

    def test_sift_up_stops_below_better_parent(self):
        heap = [0, 2, 4, 6, 8, 10, 5]
        position = heap_ops.sift_up(heap, 6)
        self.assertEqual(position, 6)
        self.assertEqual(heap, [0, 2, 4, 6, 8, 10, 5])

    def test_sift_down_after_root_replaced(self):
        heap = [9, 1, 2, 3, 4, 5]
        position = heap_ops.sift_down(heap, 0)
        self.assertEqual(heap[0], 1)
        self.assertNotEqual(position, 0)
        self.assertTrue(heap_ops.is_valid(heap))

    def test_sift_down_scans_every_child(self):
        # Root with three children under a ternary layout; the last one wins.
        heap = [10, 7, 8, 3]
        position = heap_ops.sift_down(heap, 0, HeapType.MIN, branching_factor=3)
        self.assertEqual(position, 3)
        self.assertEqual(heap, [3, 7, 8, 10])

    def test_sift_down_max_ordering(self):
        heap = [1, 9, 4]
        heap_ops.sift_down(heap, 0, HeapType.MAX)
        self.assertEqual(heap, [9, 1, 4])

    def test_sift_down_respects_end(self):
        heap = [5, 4, 3, 0]
        heap_ops.sift_down(heap, 0, end=1)
        self.assertEqual(heap, [5, 4, 3, 0])

    def test_sift_out_of_range_is_index_error(self):
        heap = [1, 2, 3]
        self.assertRaises(IndexError, heap_ops.sift_down, heap, 3)
        self.assertRaises(IndexError, heap_ops.sift_up, heap, -1)
        self.assertRaises(IndexError, heap_ops.sift_down, heap, 0, end=4)
        self.assertRaises(IndexError, heap_ops.sift_down, [], 0)

    def test_branching_factor_below_two_rejected(self):
        self.assertRaises(ValueError, heap_ops.insert, [], 1, HeapType.MIN, 1)
        self.assertRaises(ValueError, heap_ops.is_valid, [1], HeapType.MIN, 0)


class TestOperations(unittest.TestCase):
    def test_insert(self):
        heap = [0, 2, 4, 6, 8, 10]
        heap_ops.insert(heap, 5)
        self.assertEqual(heap[0], 0)
        self.assertEqual(len(heap), 7)
        self.assertTrue(heap_ops.is_valid(heap))

    def test_extract(self):
        heap = [0, 2, 4, 6, 8, 10]
        self.assertEqual(heap_ops.extract(heap), 0)
        self.assertEqual(heap[0], 2)
        self.assertIsNone(heap_ops.extract([]))

    def test_find(self):
        heap = [0, 2, 4, 6, 8, 10]
        self.assertEqual(heap_ops.find(heap, 6), 3)
        self.assertIsNone(heap_ops.find(heap, 7))

    def test_find_returns_first_match(self):
        self.assertEqual(heap_ops.find([1, 3, 3, 3], 3), 1)

    def test_remove(self):
        heap = [0, 2, 4, 6, 8, 10]
        self.assertEqual(heap_ops.remove(heap, 3), 6)
        self.assertEqual(heap[0], 0)
        self.assertEqual(len(heap), 5)
        self.assertTrue(heap_ops.is_valid(heap))

    def test_remove_last_position(self):
        heap = [0, 2, 4]
        self.assertEqual(heap_ops.remove(heap, 2), 4)
        self.assertEqual(heap, [0, 2])

    def test_remove_sifts_moved_element_up(self):
        # The last element (4) lands under parent 20 and has to climb.
        heap = [1, 20, 2, 21, 22, 3, 4]
        self.assertTrue(heap_ops.is_valid(heap))
        self.assertEqual(heap_ops.remove(heap, 4), 22)
        self.assertTrue(heap_ops.is_valid(heap))
        self.assertEqual(sorted(heap), [1, 2, 3, 4, 20, 21])

    def test_remove_errors_leave_heap_unchanged(self):
        empty = []
        self.assertRaises(EmptyHeapError, heap_ops.remove, empty, 0)
        self.assertEqual(empty, [])

        heap = [0, 2, 4]
        self.assertRaises(InvalidIndexError, heap_ops.remove, heap, 3)
        self.assertRaises(InvalidIndexError, heap_ops.remove, heap, -1)
        self.assertEqual(heap, [0, 2, 4])

    def test_replace(self):
        heap = [0, 2, 4, 6, 8, 10]
        self.assertEqual(heap_ops.replace(heap, 3, 11), 6)
        self.assertEqual(heap[0], 0)
        self.assertTrue(heap_ops.is_valid(heap))

        self.assertEqual(heap_ops.replace(heap, 5, -3), 10)
        self.assertEqual(heap[0], -3)
        self.assertTrue(heap_ops.is_valid(heap))

    def test_update_with_returned_value(self):
        heap = [0, 2, 4, 6, 8, 10]
        position = heap_ops.update(heap, 4, lambda x: x - 10)
        self.assertEqual(position, 0)
        self.assertEqual(heap[0], -2)
        self.assertTrue(heap_ops.is_valid(heap))

    def test_update_in_place(self):
        heap = [[0], [2], [4], [6]]
        key = lambda item: item[0]
        heap_ops.update(heap, 0, lambda item: item.__setitem__(0, 5), key=key)
        self.assertEqual(heap[0], [2])
        self.assertTrue(heap_ops.is_valid(heap, key=key))

    def test_update_errors_do_not_call_mutator(self):
        calls = []

        def mutator(x):
            calls.append(x)
            return x

        self.assertRaises(EmptyHeapError, heap_ops.update, [], 0, mutator)
        self.assertRaises(InvalidIndexError, heap_ops.update, [1, 2], 2, mutator)
        self.assertEqual(calls, [])


class TestBulk(unittest.TestCase):
    DATA = [8, 66, 9, 55, 7, 0, 14, 6, 37, 2]

    def test_heapify_then_extract_is_sorted(self):
        heap = list(self.DATA)
        heap_ops.heapify(heap)
        self.assertTrue(heap_ops.is_valid(heap))
        self.assertEqual(heap[0], 0)
        out = []
        while heap:
            out.append(heap_ops.extract(heap))
        self.assertEqual(out, sorted(self.DATA))

    def test_heapify_is_idempotent(self):
        for branching_factor in (2, 3, 5):
            heap = list(self.DATA)
            heap_ops.heapify(heap, HeapType.MAX, branching_factor)
            snapshot = list(heap)
            heap_ops.heapify(heap, HeapType.MAX, branching_factor)
            self.assertEqual(heap, snapshot)
            self.assertTrue(heap_ops.is_valid(heap, HeapType.MAX, branching_factor))

    def test_heapify_trivial_sizes(self):
        for heap in ([], [1], [2, 1]):
            heap_ops.heapify(heap)
            self.assertTrue(heap_ops.is_valid(heap))

    def test_heap_sort_min_is_ascending(self):
        heap = list(self.DATA)
        heap_ops.heap_sort(heap, HeapType.MIN)
        self.assertEqual(heap, sorted(self.DATA))

    def test_heap_sort_max_is_descending(self):
        heap = list(self.DATA)
        heap_ops.heap_sort(heap, HeapType.MAX, branching_factor=3)
        self.assertEqual(heap, sorted(self.DATA, reverse=True))

    def test_heap_sort_random(self):
        rng = random.Random(7)
        for branching_factor in (2, 3, 4, 8):
            data = [rng.randrange(1000) for _ in range(500)]
            heap = list(data)
            heap_ops.heap_sort(heap, HeapType.MIN, branching_factor)
            self.assertEqual(heap, sorted(data))

    def test_heap_sort_with_key(self):
        pairs = [("c", 3), ("a", 1), ("d", 4), ("b", 2)]
        heap_ops.heap_sort(pairs, HeapType.MAX, key=lambda pair: pair[1])
        self.assertEqual([name for name, _ in pairs], ["d", "c", "b", "a"])

    def test_is_valid_detects_violation(self):
        self.assertFalse(heap_ops.is_valid([3, 1, 2]))
        self.assertTrue(heap_ops.is_valid([3, 1, 2], HeapType.MAX))
        # Broken as a binary heap, valid under a ternary layout.
        self.assertFalse(heap_ops.is_valid([0, 5, 1, 2]))
        self.assertTrue(heap_ops.is_valid([0, 5, 1, 2], HeapType.MIN, 3))


if __name__ == "__main__":
    unittest.main()
