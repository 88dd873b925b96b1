"""
Sequence Helpers — функции над упорядоченными последовательностями

Модуль содержит свободные функции над последовательностями ("slice"):
- Преобразования с сохранением порядка: filter_slice / map_slice / foreach_slice
- Группировка: grouped_by_slice
- Алгебра множеств над последовательностями через Set:
  slice_union / slice_intersection / slice_complement / slice_difference
- Доступ к краям: first / last (пустая последовательность → EmptySequenceError)
- Линейный поиск: contains_slice

Входные последовательности могут содержать дубликаты. Функции алгебры
множеств работают с дедуплицированной формой входов; кратности в результат
не переносятся, порядок результата не определён.

Последовательности принадлежат вызывающему коду: функции их не изменяют
и не сохраняют ссылок на них.
"""

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

from setkit.core.hashset import Set
from setkit.logger import get_logger

T = TypeVar("T")
S = TypeVar("S")
H = TypeVar("H", bound=Hashable)
K = TypeVar("K", bound=Hashable)

_log = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptySequenceError(IndexError):
    """
    Нарушение предусловия: first/last вызваны на пустой последовательности.

    Вызывающий код обязан гарантировать непустой вход. Значение по умолчанию
    никогда не подставляется. Наследует IndexError для совместимости со
    строгим индексным доступом seq[0] / seq[-1].
    """

    pass


# =============================================================================
# КОНВЕРСИЯ В SET
# =============================================================================


def slice_to_set(s: Iterable[H]) -> Set[H]:
    """
    Создание множества из последовательности (с дедупликацией).

    Examples:
        >>> sorted(slice_to_set([1, 1, 2, 3, 3]))
        [1, 2, 3]
    """
    return Set(s)


def map_slice_to_set(s: Iterable[T], f: Callable[[T], H]) -> Set[H]:
    """
    Преобразование элементов через f с последующей дедупликацией.

    Эквивалентно slice_to_set(map_slice(s, f)); размер результата <= len(s).
    """
    result: Set[H] = Set()
    for item in s:
        result.add(f(item))
    return result


# =============================================================================
# ГРУППИРОВКА И ОБХОД
# =============================================================================


def grouped_by_slice(s: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Разбиение последовательности на группы по key(element).

    Порядок элементов внутри группы совпадает с порядком во входе.
    key вычисляется ровно один раз для каждого элемента.

    Examples:
        >>> grouped_by_slice([1, 2, 2, 3], lambda n: n)
        {1: [1], 2: [2, 2], 3: [3]}
    """
    groups: dict[K, list[T]] = {}
    for value in s:
        groups.setdefault(key(value), []).append(value)
    return groups


def foreach_slice(s: Iterable[T], apply: Callable[[T], Any]) -> None:
    """Вызов apply для каждого элемента в порядке последовательности."""
    for item in s:
        apply(item)


# =============================================================================
# АЛГЕБРА МНОЖЕСТВ НАД ПОСЛЕДОВАТЕЛЬНОСТЯМИ
# =============================================================================


def slice_union(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Объединение двух последовательностей. Порядок не гарантируется."""
    return slice_to_set(a).union(slice_to_set(b)).to_list()


def slice_intersection(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Пересечение двух последовательностей. Порядок не гарантируется."""
    return slice_to_set(a).intersection(slice_to_set(b)).to_list()


def slice_complement(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """
    Дополнение a относительно b: элементы b, которых нет в a.

    Порядок не гарантируется.

    Examples:
        >>> sorted(slice_complement([1, 3, 4, 6], [1, 2, 3, 5]))
        [2, 5]
    """
    return slice_to_set(a).complement(slice_to_set(b)).to_list()


def slice_difference(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Разность a - b. Порядок не гарантируется."""
    return slice_to_set(a).difference(slice_to_set(b)).to_list()


# =============================================================================
# ПРЕОБРАЗОВАНИЯ С СОХРАНЕНИЕМ ПОРЯДКА
# =============================================================================


def filter_slice(s: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Фильтрация элементов с сохранением порядка."""
    return [e for e in s if predicate(e)]


def map_slice(s: Iterable[T], convert: Callable[[T], S]) -> list[S]:
    """
    Преобразование элементов с сохранением порядка.

    Длина результата всегда равна длине входа: дубликаты сохраняются
    (в отличие от map_slice_to_set).
    """
    return [convert(e) for e in s]


# =============================================================================
# ДОСТУП И ПОИСК
# =============================================================================


def first(s: Sequence[T]) -> T:
    """
    Первый элемент последовательности.

    Raises:
        EmptySequenceError: Если последовательность пуста
    """
    if len(s) == 0:
        _log.debug("first() called on an empty %s", type(s).__name__)
        raise EmptySequenceError("first() requires a non-empty sequence")
    return s[0]


def last(s: Sequence[T]) -> T:
    """
    Последний элемент последовательности.

    Raises:
        EmptySequenceError: Если последовательность пуста
    """
    if len(s) == 0:
        _log.debug("last() called on an empty %s", type(s).__name__)
        raise EmptySequenceError("last() requires a non-empty sequence")
    return s[-1]


def contains_slice(s: Iterable[T], t: T) -> bool:
    """
    Линейный поиск значения в последовательности, O(n).

    Используется, когда вход ещё не преобразован в Set.
    """
    for v in s:
        if v == t:
            return True
    return False
