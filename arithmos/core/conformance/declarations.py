"""
Conformance Declarations — привязка конкретных типов к capabilities

Единственное место, где конкретные value types входят в модель.

@conforms(*capabilities) выполняется в момент определения класса
(import time) и отклоняет частичную conformance: каждая обязательная
операция каждой атомарной capability (composites раскрываются) должна
быть реализована классом. Принятые объявления сохраняются на классе
как неизменяемый кортеж ConformanceDeclaration.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Частичная conformance → ConformanceError при объявлении класса
2. Composite satisfaction структурна: satisfies() не зависит от объявлений
3. In-place формы (+=, -=) выводятся, а не объявляются: тип,
   определяющий __iadd__/__isub__ при Addable/Subtractable, отклоняется
4. Никакого глобального реестра: всё состояние живёт на самом классе
"""

import logging
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from arithmos.core.capabilities.atomic import ATOMIC_CAPABILITIES
from arithmos.core.capabilities.derived import DERIVED_IN_PLACE
from arithmos.core.errors import ConformanceError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)

CONFORMANCES_ATTR = "__conformances__"


# =============================================================================
# MODELS
# =============================================================================


class ConformanceDeclaration(BaseModel):
    """
    Пара (type, capability): тип реализует операции capability.

    Immutable модель (frozen=True); создаётся только @conforms.
    """

    value_type: type[Any] = Field(..., description="Конкретный value type")
    capability: type[Any] = Field(..., description="Объявленная capability")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def capability_name(self) -> str:
        return self.capability.__name__

    def __str__(self) -> str:
        return f"{self.value_type.__name__}: {self.capability_name}"


# =============================================================================
# ИНТРОСПЕКЦИЯ CAPABILITIES
# =============================================================================


def capability_members(capability: type) -> tuple[type, ...]:
    """
    Атомарные capabilities, из которых состоит capability.

    Для атомарной capability возвращает её саму, для composite —
    все атомарные члены (в порядке MRO).

    Raises:
        TypeError: Если capability не является capability arithmos
    """
    members = tuple(
        klass for klass in capability.__mro__ if klass in ATOMIC_CAPABILITIES
    )
    if not members:
        raise TypeError(f"{capability!r} is not an arithmos capability")
    return members


def required_operations(capability: type) -> frozenset[str]:
    """
    Имена операций, которые требует capability (включая членов composite).

    Examples:
        >>> sorted(required_operations(Additive))
        ['__add__', '__sub__']
    """
    capability_members(capability)
    return frozenset(capability.__abstractmethods__)


def _implements(cls: type, name: str) -> bool:
    # object.__lt__ и подобные заглушки не считаются реализацией
    for klass in cls.__mro__:
        if name in vars(klass):
            if klass is object:
                return False
            return not getattr(vars(klass)[name], "__isabstractmethod__", False)
    return False


def missing_operations(cls: type, capability: type) -> tuple[str, ...]:
    """Операции capability, которые cls не реализует (отсортированы)."""
    return tuple(
        sorted(name for name in required_operations(capability) if not _implements(cls, name))
    )


def satisfies(cls: type, capability: type) -> bool:
    """
    Структурная проверка: реализует ли cls все операции capability.

    Не зависит от объявлений @conforms: composite удовлетворяется,
    если удовлетворены все его члены.
    """
    return not missing_operations(cls, capability)


def require(cls: type, *capabilities: type) -> None:
    """
    Проверка, что cls удовлетворяет всем capabilities.

    Raises:
        ConformanceError: Для первой неудовлетворённой capability
    """
    for capability in capabilities:
        missing = missing_operations(cls, capability)
        if missing:
            raise ConformanceError(cls.__name__, capability.__name__, missing)


# =============================================================================
# ОБЪЯВЛЕНИЕ CONFORMANCE
# =============================================================================


def _check_derived_in_place(cls: type, capability: type) -> None:
    operations = required_operations(capability)
    for base_op, in_place_op in DERIVED_IN_PLACE:
        if base_op in operations and _implements(cls, in_place_op):
            raise ConformanceError(
                cls.__name__,
                capability.__name__,
                reason=f"{in_place_op} is derived from {base_op} and must not be declared",
            )


def conforms(*capabilities: type) -> Callable[[T], T]:
    """
    Декоратор класса: объявление conformance value type к capabilities.

    Args:
        *capabilities: Атомарные или composite capabilities

    Returns:
        Декоратор, возвращающий тот же класс с записанными объявлениями

    Raises:
        ConformanceError: Если класс не реализует хотя бы одну операцию
        TypeError: Если capabilities пусты или не являются capabilities

    Examples:
        >>> @conforms(ArithmeticType, OverflowOperable)
        ... class Int8(FixedWidthInteger):
        ...     LAYOUT = IntegerLayout(bits=8, signed=True)
    """
    if not capabilities:
        raise TypeError("conforms() requires at least one capability")
    for capability in capabilities:
        capability_members(capability)

    def decorate(cls: T) -> T:
        for capability in capabilities:
            require(cls, capability)
            _check_derived_in_place(cls, capability)

        declarations = tuple(vars(cls).get(CONFORMANCES_ATTR, ())) + tuple(
            ConformanceDeclaration(value_type=cls, capability=capability)
            for capability in capabilities
        )
        setattr(cls, CONFORMANCES_ATTR, declarations)

        logger.debug(
            "%s conforms to %s",
            cls.__qualname__,
            ", ".join(capability.__name__ for capability in capabilities),
        )
        return cls

    return decorate


def declarations_of(cls: type) -> tuple[ConformanceDeclaration, ...]:
    """Объявления conformance, сделанные для самого cls (без наследования)."""
    return tuple(vars(cls).get(CONFORMANCES_ATTR, ()))


def declared_capabilities(cls: type) -> frozenset[type]:
    """
    Атомарные capabilities, объявленные для cls (composites раскрыты).

    Examples:
        >>> Addable in declared_capabilities(String)
        True
    """
    return frozenset(
        member
        for declaration in declarations_of(cls)
        for member in capability_members(declaration.capability)
    )


def declares(cls: type, capability: type) -> bool:
    """Объявлены ли для cls все атомарные члены capability."""
    return set(capability_members(capability)) <= declared_capabilities(cls)
