"""
Errors — Таксономия ошибок arithmos

Все ошибки структурированы: каждая несёт машинно-читаемый code и
наследуется от соответствующего встроенного исключения Python, чтобы
вызывающий код мог ловить их и как OverflowError / ZeroDivisionError /
TypeError.

КЛАССЫ ОШИБОК:
1. ArithmeticOverflowError — переполнение non-wrapping операции (trap)
2. DivisionByZeroError — деление/остаток на ноль для целочисленных типов
3. ConformanceError — тип не реализует требуемую capability

Внутри ядра ошибки никогда не перехватываются и не повторяются.
Для recoverable переполнения используйте wrapping_* операции явно.
"""


class ArithmosError(Exception):
    """
    Базовая структурированная ошибка.

    Attributes:
        code: Машинно-читаемый код ошибки
        message: Человекочитаемое описание
    """

    code: str = "arithmos_error"

    def __init__(self, message: str, code: str | None = None):
        self.code = code or self.code
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ArithmeticOverflowError(ArithmosError, OverflowError):
    """
    Результат non-wrapping операции вышел за представимый диапазон типа.

    Programming error: поверхностно сообщается сразу, без recovery.
    """

    code = "arithmetic_overflow"

    def __init__(self, operation: str, operands: tuple, type_name: str):
        self.operation = operation
        self.operands = operands
        self.type_name = type_name
        rendered = ", ".join(repr(operand) for operand in operands)
        super().__init__(
            f"{type_name}.{operation}({rendered}) overflows the representable range"
        )


class DivisionByZeroError(ArithmosError, ZeroDivisionError):
    """Деление или остаток на ноль для типа, где результат не определён."""

    code = "division_by_zero"

    def __init__(self, operation: str, type_name: str):
        self.operation = operation
        self.type_name = type_name
        super().__init__(f"{type_name}.{operation} by zero")


class ConformanceError(ArithmosError, TypeError):
    """
    Тип не удовлетворяет требуемой capability.

    Возникает при объявлении частичной conformance (@conforms) или при
    вызове generic-алгоритма с типом без нужной capability.
    """

    code = "conformance_error"

    def __init__(
        self,
        type_name: str,
        capability: str,
        missing: tuple[str, ...] = (),
        reason: str | None = None,
    ):
        self.type_name = type_name
        self.capability = capability
        self.missing = missing
        if reason is None:
            reason = f"missing {', '.join(missing)}" if missing else "not satisfied"
        super().__init__(f"{type_name} does not conform to {capability}: {reason}")
