"""
# 可选值模块 (Option Module)
#
# 本文件实现了Option容器，用于统一表示"可能存在也可能不存在"的值。主要内容包括：
#
# 1. Option类：可选值容器
#    - 状态判断：is_some / is_none / is_some_and / as_slice
#    - 取值：expect / unwrap / unwrap_or / unwrap_or_else
#    - 变换：map / inspect / map_or / map_or_else
#    - 组合：and_ / and_then / filter / or_ / or_else / xor / zip
#    - 原地修改：insert / get_or_insert / get_or_insert_with / take / replace
#
# 2. 辅助函数：
#    - some：创建包含值的Option实例
#    - none：创建空的Option实例
#
# 与其他组件的关系：
# - 使用optionkit/exception.py中的AbsentValueError表示断言失败
# - 不依赖任何配置，unwrap的默认提示信息固定为"Option is None"
# - 空状态使用私有标记对象表示，因此None本身也可以作为有效值保存
"""
import logging
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, Type, TypeVar, cast

from optionkit.exception import AbsentValueError


_T = TypeVar("_T")
_TRes = TypeVar("_TRes")

logger = logging.getLogger(__name__)

DEFAULT_UNWRAP_MESSAGE = "Option is None"


class _Absent:
    def __repr__(self) -> str: return "<absent>"


# Absence marker, never exposed outside this module
_ABSENT: Any = _Absent()


class Option(Generic[_T]):
    """
    A value slot that is either present (Some) or empty (None).

    ``Option()`` and ``Option(None)`` build an empty container, any other
    argument builds a present one. Use ``Option.of`` to wrap ``None`` itself
    as a present value.
    """

    def __init__(self, value: Optional[_T] = None) -> None:
        self._value: Any = _ABSENT if value is None else value

    @classmethod
    def _from_slot(cls, slot: Any) -> "Option[_T]":
        opt: "Option[_T]" = cls.__new__(cls)
        opt._value = slot
        return opt

    @classmethod
    def of(cls, value: _T) -> "Option[_T]": return cls._from_slot(value)

    @classmethod
    def empty(cls) -> "Option[_T]": return cls._from_slot(_ABSENT)

    @classmethod
    def some(cls, value: _T) -> "Option[_T]": return cls.of(value)

    @classmethod
    def none(cls) -> "Option[_T]": return cls.empty()

    def _exchange(self, value: Any) -> "Option[_T]":
        previous = type(self)._from_slot(self._value)
        self._value = value
        return previous

    # State inspection

    @property
    def is_some(self) -> bool: return self._value is not _ABSENT

    @property
    def is_none(self) -> bool: return self._value is _ABSENT

    @property
    def value(self) -> Optional[_T]:
        return None if self.is_none else cast(_T, self._value)

    def is_some_and(self, predicate: Callable[[_T], bool]) -> bool:
        return self.is_some and bool(predicate(cast(_T, self._value)))

    def as_slice(self) -> List[_T]:
        return [cast(_T, self._value)] if self.is_some else []

    # Extraction

    def expect(self, message: str) -> _T:
        if self.is_some:
            return cast(_T, self._value)
        logger.debug("expect() on an empty Option: %s", message)
        raise AbsentValueError(message)

    def unwrap(self) -> _T: return self.expect(DEFAULT_UNWRAP_MESSAGE)

    def unwrap_or(self, fallback: _T) -> _T:
        return self.unwrap_or_else(lambda: fallback)

    def unwrap_or_else(self, func: Callable[[], _T]) -> _T:
        return cast(_T, self._value) if self.is_some else func()

    # Transformation

    def map(self, func: Callable[[_T], _TRes]) -> "Option[_TRes]":
        return Option.of(func(cast(_T, self._value))) if self.is_some else Option()

    def inspect(self, func: Callable[[_T], Any]) -> "Option[_T]":
        if self.is_some:
            func(cast(_T, self._value))
        return self

    def map_or(self, fallback: _TRes, func: Callable[[_T], _TRes]) -> _TRes:
        return self.map_or_else(lambda: fallback, func)

    def map_or_else(self, fallback: Callable[[], _TRes], func: Callable[[_T], _TRes]) -> _TRes:
        return func(cast(_T, self._value)) if self.is_some else fallback()

    # Combination

    def and_(self, other: "Option[_TRes]") -> "Option[_TRes]":
        return self.and_then(lambda _: other)

    def and_then(self, func: Callable[[_T], "Option[_TRes]"]) -> "Option[_TRes]":
        return func(cast(_T, self._value)) if self.is_some else Option()

    def filter(self, predicate: Callable[[_T], bool]) -> "Option[_T]":
        return self if self.is_some_and(predicate) else Option()

    def or_(self, other: "Option[_T]") -> "Option[_T]":
        return self.or_else(lambda: other)

    def or_else(self, func: Callable[[], "Option[_T]"]) -> "Option[_T]":
        return self if self.is_some else func()

    def xor(self, other: "Option[_T]") -> "Option[_T]":
        if self.is_some:
            return self if other.is_none else Option()
        return other if other.is_some else Option()

    def zip(self, other: "Option[_TRes]") -> "Option[Tuple[_T, _TRes]]":
        if self.is_some and other.is_some:
            return Option.of((cast(_T, self._value), cast(_TRes, other._value)))
        return Option()

    # Mutation

    def insert(self, value: _T) -> _T:
        self._value = value
        return value

    def get_or_insert(self, value: _T) -> _T:
        return self.get_or_insert_with(lambda: value)

    def get_or_insert_with(self, func: Callable[[], _T]) -> _T:
        return cast(_T, self._value) if self.is_some else self.insert(func())

    def take(self) -> "Option[_T]": return self._exchange(_ABSENT)

    def replace(self, value: _T) -> "Option[_T]": return self._exchange(value)

    # Python protocols

    def __and__(self, other: "Option[_TRes]") -> "Option[_TRes]": return self.and_(other)
    def __or__(self, other: "Option[_T]") -> "Option[_T]": return self.or_(other)
    def __xor__(self, other: "Option[_T]") -> "Option[_T]": return self.xor(other)

    def __iter__(self) -> Iterator[_T]: return iter(self.as_slice())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self.is_none or other.is_none:
            return self.is_none and other.is_none
        return bool(self._value == other._value)

    # Mutable, so not hashable
    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"Option.some({self._value!r})" if self.is_some else "Option.none()"


def some(value: _T) -> Option[_T]: return Option.of(value)
def none(_: Type[_T]) -> Option[_T]: return Option.empty()
