"""
Ordered multiset operations

Пересечение и разность упорядоченных multiset (кратность учитывается) одним
проходом двумя указателями. set() здесь не подходит: множитель 2, входящий
дважды в обе стороны, должен сократиться дважды.

Входы должны быть упорядочены по неубыванию (как результат
divide_with_primes); выходы сохраняют порядок.
"""

from typing import Sequence

from primefrac.core.math.numeric_safeguards import validate_non_decreasing


def multiset_intersection(left: Sequence[int], right: Sequence[int]) -> tuple[int, ...]:
    """
    Пересечение multiset: каждый общий элемент берётся min(count_left, count_right) раз.

    Raises:
        ValueError: Если вход не упорядочен

    Examples:
        >>> multiset_intersection((1, 2, 3, 3), (2, 3, 4, 5))
        (2, 3)
        >>> multiset_intersection((2, 2, 3), (2, 2, 2, 5))
        (2, 2)
    """
    validate_non_decreasing(left, "left")
    validate_non_decreasing(right, "right")

    common: list[int] = []
    i = j = 0

    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            i += 1
        elif right[j] < left[i]:
            j += 1
        else:
            common.append(left[i])
            i += 1
            j += 1

    return tuple(common)


def multiset_difference(source: Sequence[int], removed: Sequence[int]) -> tuple[int, ...]:
    """
    Разность multiset: из source удаляется каждое вхождение removed по одному разу.

    Элементы removed, отсутствующие в source, игнорируются.

    Raises:
        ValueError: Если вход не упорядочен

    Examples:
        >>> multiset_difference((1, 2, 3, 3), (2, 3))
        (1, 3)
        >>> multiset_difference((2, 3, 4, 5), (2, 3))
        (4, 5)
    """
    validate_non_decreasing(source, "source")
    validate_non_decreasing(removed, "removed")

    remaining: list[int] = []
    i = j = 0

    while i < len(source):
        if j >= len(removed) or source[i] < removed[j]:
            remaining.append(source[i])
            i += 1
        elif removed[j] < source[i]:
            j += 1
        else:
            i += 1
            j += 1

    return tuple(remaining)
