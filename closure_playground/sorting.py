# sorting.py

from functools import cmp_to_key
from typing import Callable, Iterable, List

# 比較関数型: a が b より前に来るなら True
Comparator = Callable[[int, int], bool]


def sorted_by(values: Iterable[int], less: Comparator) -> List[int]:
    """
    less（厳密な全順序）に従って並べた新しいリストを返す。入力は変更しない。
    """
    def compare(a: int, b: int) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(values, key=cmp_to_key(compare))


def sort_using_nested_function(values: List[int]) -> List[int]:
    def ascending(a: int, b: int) -> bool:
        return a < b

    return sorted_by(values, ascending)


def sort_using_closure(values: List[int]) -> List[int]:
    return sorted_by(values, lambda a, b: (
        a < b
    ))


def sort_using_closure_short(values: List[int]) -> List[int]:
    return sorted_by(values, lambda a, b: a < b)


SORT_VARIANTS = (
    sort_using_nested_function,
    sort_using_closure,
    sort_using_closure_short,
)
