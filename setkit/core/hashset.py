"""
Set — хеш-множество уникальных элементов

Модуль реализует множество поверх словаря с ключами-элементами:
- Мутация на месте: add / remove (идемпотентны, без ошибок)
- Алгебра множеств: union / intersection / difference / complement / equals
- Функциональные помощники: filter / map

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Элементы уникальны (равенство + hash)
2. Алгебраические операции возвращают новое множество и никогда не изменяют операнды
3. A.difference(B) != B.difference(A) в общем случае
4. A.complement(B) = B \\ A (результат берётся из B, а не из A)
5. Порядок итерации не гарантируется

Экземпляры Set не потокобезопасны: конкурентная мутация одного экземпляра
требует внешней синхронизации на стороне вызывающего кода.
"""

from collections.abc import Callable, Hashable, Iterable, Iterator, MutableSet
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

T = TypeVar("T", bound=Hashable)
S = TypeVar("S", bound=Hashable)


# =============================================================================
# SET
# =============================================================================


class Set(MutableSet, Generic[T]):
    """
    Неупорядоченная коллекция уникальных hashable элементов.

    Хранилище: приватный dict с None-значениями; словарь не является
    частью публичного контракта.

    Examples:
        >>> a = Set([1, 2, 3, 4])
        >>> b = Set([2, 4, 5])
        >>> sorted(a.difference(b))
        [1, 3]
        >>> sorted(a.complement(b))
        [5]
    """

    __slots__ = ("_items",)
    _items: dict[T, None]

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        if iterable is None:
            self._items = {}
        else:
            self._items = dict.fromkeys(iterable)

    # -------------------------------------------------------------------------
    # collections.abc протокол
    # -------------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[T]:
        yield from self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    # -------------------------------------------------------------------------
    # Мутация
    # -------------------------------------------------------------------------

    def add(self, key: T) -> None:
        """Добавить элемент (идемпотентно)."""
        self._items[key] = None

    def discard(self, key: T) -> None:
        """Удалить элемент, если он есть (без ошибки)."""
        self._items.pop(key, None)

    def remove(self, key: T) -> None:
        """
        Удалить элемент, если он есть.

        В отличие от MutableSet.remove, отсутствующий ключ означает no-op,
        KeyError не выбрасывается.
        """
        self.discard(key)

    def contains(self, key: T) -> bool:
        return key in self._items

    def copy(self) -> "Set[T]":
        new_set: Set[T] = Set()
        new_set._items = self._items.copy()
        return new_set

    # -------------------------------------------------------------------------
    # Алгебра множеств
    # -------------------------------------------------------------------------

    def union(self, other: "Set[T]") -> "Set[T]":
        """
        A ∪ B: элементы, присутствующие хотя бы в одном операнде.

        Копируется большее множество, затем в копию вставляются элементы
        меньшего. Операнды не изменяются.

        Args:
            other: Второй операнд

        Returns:
            Новое множество
        """
        small, large = _small_large(self, other)

        result = large.copy()
        for key in small:
            result.add(key)
        return result

    def intersection(self, other: "Set[T]") -> "Set[T]":
        """
        A ∩ B: элементы, присутствующие в обоих операндах.

        Итерация по меньшему операнду, проверка членства в большем:
        O(min(|A|, |B|)).
        """
        small, large = _small_large(self, other)

        result: Set[T] = Set()
        for key in small:
            if key in large:
                result.add(key)
        return result

    def complement(self, other: "Set[T]") -> "Set[T]":
        """
        Дополнение self относительно other: other \\ self.

        ВАЖНО: результат состоит из элементов other, которых нет в self.
        Получатель (self) является исключаемым множеством.

        Examples:
            >>> sorted(Set([1, 3, 4, 6]).complement(Set([1, 2, 3, 5])))
            [2, 5]
        """
        result: Set[T] = Set()
        for key in other:
            if key not in self._items:
                result.add(key)
        return result

    # Самодокументирующее имя для complement: A.excluded_from(B) = B \ A
    excluded_from = complement

    def difference(self, other: "Set[T]") -> "Set[T]":
        """
        Разность A - B: элементы self, которых нет в other.

        ВАЖНО: A - B != B - A.
        """
        result: Set[T] = Set()
        for key in self._items:
            if key not in other:
                result.add(key)
        return result

    def equals(self, other: "Set[T]") -> bool:
        """A == B: все элементы A есть в B и наоборот."""
        return len(self.difference(other)) == 0 and len(other.difference(self)) == 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Set):
            return self.equals(other)
        return super().__eq__(other)

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def to_list(self) -> list[T]:
        """
        Материализация элементов в список.

        Порядок не определён, сравнивать результат следует без учёта порядка.
        """
        return list(self._items)

    def filter(self, predicate: Callable[[T], bool]) -> "Set[T]":
        """Новое множество из элементов, удовлетворяющих predicate."""
        result: Set[T] = Set()
        for key in self._items:
            if predicate(key):
                result.add(key)
        return result

    def map(self, convert: Callable[[T], S]) -> "Set[S]":
        """
        Преобразование каждого элемента через convert.

        Если convert не инъективна, совпавшие образы сливаются, и размер
        результата может быть меньше исходного.
        """
        result: Set[S] = Set()
        for key in self._items:
            result.add(convert(key))
        return result

    # -------------------------------------------------------------------------
    # Pydantic интеграция
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Схема для использования Set[T] как поля pydantic модели.

        Вход: экземпляр Set или list/tuple/set элементов (дубликаты сливаются).
        Элементы всегда валидируются как T, и модель получает новый Set:
        последующие изменения исходного множества её не затрагивают.
        Выход: список; JSON Schema — массив с uniqueItems.
        """
        args = get_args(source_type)
        item_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()

        from_items = core_schema.no_info_after_validator_function(
            cls, core_schema.set_schema(item_schema)
        )

        return core_schema.no_info_before_validator_function(
            _unwrap_set,
            from_items,
            serialization=core_schema.plain_serializer_function_ser_schema(
                list,
                return_schema=core_schema.list_schema(item_schema),
            ),
        )


# =============================================================================
# FREE FUNCTIONS
# =============================================================================


def new_set(size: int = 0) -> Set[Any]:
    """
    Создание пустого множества.

    Args:
        size: Ожидаемая ёмкость. Python dict не поддерживает предвыделение,
            поэтому значение только валидируется.

    Raises:
        ValueError: Если size < 0
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return Set()


def map_set(values: Set[T], convert: Callable[[T], S]) -> Set[S]:
    """Преобразование элементов множества в множество другого типа."""
    return values.map(convert)


def _unwrap_set(value: Any) -> Any:
    """Set → list, чтобы элементы прошли валидацию set_schema."""
    if isinstance(value, Set):
        return list(value)
    return value


def _small_large(a: Set[T], b: Set[T]) -> tuple[Set[T], Set[T]]:
    """Возвращает (меньшее, большее) по len; при равенстве большим считается a."""
    if len(b) > len(a):
        return a, b
    return b, a
