# app/api/validation.py
"""
Декларативные цепочки правил для полей запроса.

Цепочка выполняет проверки по порядку и останавливается на первой
неудачной (bail). Цепочки разных полей независимы: pydantic собирает
ошибки всех полей в один ответ 422.
"""

import math
import re
from typing import Any, Callable, List, Optional

from pydantic_core import PydanticCustomError

from api.sanitizer import strip_tags as remove_tags

UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
INT_RE = re.compile(r"^[+-]?\d+$")

TRUE_LITERALS = ("true", "1")
FALSE_LITERALS = ("false", "0")

Step = Callable[[Any], Any]


def violation(message: str) -> PydanticCustomError:
    """Ошибка правила; сообщение уходит клиенту как есть."""
    return PydanticCustomError("rule_violation", message)


def parse_bool(value: Any) -> bool:
    """
    Преобразует булев литерал в bool.

    Accepts ``true``, ``false``, ``1``, ``0`` and their string forms.

    Raises:
        ValueError: Если значение не является булевым литералом
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        if value in TRUE_LITERALS:
            return True
        if value in FALSE_LITERALS:
            return False
    raise ValueError(f"{value!r} is not a boolean literal")


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def _as_number(value: Any, pattern: re.Pattern) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and pattern.fullmatch(value):
        number = float(value)
    else:
        return None
    return number if math.isfinite(number) else None


class Rules:
    """
    Цепочка правил одного поля.

    Example:
        NAME = Rules().trim().not_empty("Name is required").length(3, 60, "...")
        NAME.run("  Books ")  # -> "Books"
    """

    def __init__(self) -> None:
        self._optional = False
        self._steps: List[Step] = []

    def _add(self, step: Step) -> "Rules":
        self._steps.append(step)
        return self

    def optional(self) -> "Rules":
        self._optional = True
        return self

    def trim(self) -> "Rules":
        return self._add(lambda value: "" if value is None else str(value).strip())

    def strip_tags(self) -> "Rules":
        """Удаляет HTML-теги, чтобы длина проверялась по сохраняемому тексту."""
        return self._add(lambda value: remove_tags(value).strip())

    def not_empty(self, message: str) -> "Rules":
        def check(value):
            if is_blank(value):
                raise violation(message)
            return value
        return self._add(check)

    def length(self, min_length: int, max_length: int, message: str) -> "Rules":
        def check(value):
            if not isinstance(value, str) or not min_length <= len(value) <= max_length:
                raise violation(message)
            return value
        return self._add(check)

    def matches(self, pattern: str, message: str) -> "Rules":
        compiled = re.compile(pattern)

        def check(value):
            if not isinstance(value, str) or not compiled.fullmatch(value):
                raise violation(message)
            return value
        return self._add(check)

    def is_uuid(self, message: str) -> "Rules":
        def check(value):
            if not isinstance(value, str) or not UUID_RE.fullmatch(value):
                raise violation(message)
            return value
        return self._add(check)

    def is_float(self, message: str, min_value: Optional[float] = None) -> "Rules":
        def check(value):
            number = _as_number(value, FLOAT_RE)
            if number is None or (min_value is not None and number < min_value):
                raise violation(message)
            return value
        return self._add(check)

    def is_int(self, message: str, min_value: Optional[int] = None) -> "Rules":
        def check(value):
            number = _as_number(value, INT_RE)
            if number is None or not number.is_integer():
                raise violation(message)
            if min_value is not None and number < min_value:
                raise violation(message)
            return value
        return self._add(check)

    def is_boolean(self, message: str) -> "Rules":
        def check(value):
            try:
                parse_bool(value)
            except ValueError:
                raise violation(message) from None
            return value
        return self._add(check)

    def run(self, value: Any) -> Any:
        """Прогоняет значение через цепочку. Пустое необязательное значение даёт None."""
        if self._optional and is_blank(value):
            return None
        for step in self._steps:
            value = step(value)
        return value

    __call__ = run
