from abc import ABC, abstractmethod
from enum import Enum


class SortingType(Enum):
    BUBBLE = 1
    SHELL = 2
    MERGE = 3
    QUICK = 4


class Sorter(ABC):
    """
    Sorts a list of integers in place and returns the same list.
    `comparisons` holds the number of element comparisons made by the last call.
    """

    def __init__(self):
        self.comparisons = 0

    @abstractmethod
    def sort(self, arr):
        ...


class BubbleSorter(Sorter):
    def sort(self, arr):
        self.comparisons = 0
        n = len(arr)
        for i in range(n - 1):
            for j in range(n - i - 1):
                self.comparisons += 1
                if arr[j] > arr[j + 1]:
                    arr[j], arr[j + 1] = arr[j + 1], arr[j]
        return arr


class ShellSorter(Sorter):
    def sort(self, arr):
        self.comparisons = 0
        n = len(arr)
        gap = n // 2
        while gap > 0:
            # Gapped insertion sort
            for i in range(gap, n):
                temp = arr[i]
                j = i
                while j >= gap:
                    self.comparisons += 1
                    if not arr[j - gap] > temp:
                        break
                    arr[j] = arr[j - gap]
                    j -= gap
                arr[j] = temp
            gap //= 2
        return arr


class MergeSorter(Sorter):
    def sort(self, arr):
        self.comparisons = 0
        self._merge_sort(arr)
        return arr

    def _merge_sort(self, arr):
        if len(arr) <= 1:
            return

        mid = len(arr) // 2
        L = arr[:mid]
        R = arr[mid:]

        # Recursively sort both halves
        self._merge_sort(L)
        self._merge_sort(R)

        self._merge(arr, L, R)

    def _merge(self, arr, L, R):
        i = j = k = 0

        # Ties take from the left half so equal values keep their order
        while i < len(L) and j < len(R):
            self.comparisons += 1
            if L[i] <= R[j]:
                arr[k] = L[i]
                i += 1
            else:
                arr[k] = R[j]
                j += 1
            k += 1

        # Copy whatever is left over
        while i < len(L):
            arr[k] = L[i]
            i += 1
            k += 1

        while j < len(R):
            arr[k] = R[j]
            j += 1
            k += 1


class QuickSorter(Sorter):
    def sort(self, arr):
        self.comparisons = 0
        self._quick_sort(arr, 0, len(arr) - 1)
        return arr

    def _quick_sort(self, arr, low, high):
        """
        Recurses into the smaller partition and loops on the larger one,
        which keeps the stack O(log n) on sorted and reverse-sorted input.
        """
        while low < high:
            pivot = self._partition(arr, low, high)
            if pivot - low < high - pivot:
                self._quick_sort(arr, low, pivot - 1)
                low = pivot + 1
            else:
                self._quick_sort(arr, pivot + 1, high)
                high = pivot - 1

    def _partition(self, arr, low, high):
        """Lomuto partition around the last element, returns the pivot's final index."""
        pivot = arr[high]
        i = low - 1

        for j in range(low, high):
            self.comparisons += 1
            if arr[j] < pivot:
                i += 1
                arr[i], arr[j] = arr[j], arr[i]

        arr[i + 1], arr[high] = arr[high], arr[i + 1]
        return i + 1


SORTERS = {
    SortingType.BUBBLE: BubbleSorter,
    SortingType.SHELL: ShellSorter,
    SortingType.MERGE: MergeSorter,
    SortingType.QUICK: QuickSorter,
}


def get_sorter(sorting_type: SortingType) -> Sorter:
    """Return a fresh sorter for the given tag."""
    if not isinstance(sorting_type, SortingType):
        raise ValueError(f"Unknown sorting type: {sorting_type!r}")
    return SORTERS[sorting_type]()
