"""
Value Semantics — общее поведение всех value types

Mixin для pydantic RootModel: равенство и хэш только внутри одного
типа, компактный repr. Гетерогенные сравнения возвращают NotImplemented.
"""


class ValueType:
    """
    Value semantics поверх RootModel.

    Значения равны тогда и только тогда, когда равны их типы и root.
    Int8(1) != Int16(1), Int8(1) != 1.
    """

    def _same_type(self, other: object) -> bool:
        return type(other) is type(self)

    def _require_same_type(self, other: object, operation: str) -> None:
        if not self._same_type(other):
            raise TypeError(
                f"{type(self).__name__}.{operation} expects {type(self).__name__}, "
                f"got {type(other).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if not self._same_type(other):
            return NotImplemented
        return self.root == other.root  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__qualname__, self.root))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.root!r})"

    def __str__(self) -> str:
        return str(self.root)
