"""
Small fallible operations used to illustrate failure propagation.

Each operation comes in two forms. The plain form unwraps its intermediate
results and raises FatalRequestError on the first missing value, the way an
unchecked unwrap crashes its caller. The ``_safe`` form returns a
ProcessResult and lets the caller decide.
"""

import re
from pathlib import Path
from typing import Optional, Sequence, TypeVar, Union

from faultline.core.errors import FatalRequestError
from faultline.core.models.result import ProcessResult

T = TypeVar("T")

I32_MIN = -2**31
I32_MAX = 2**31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def unwrap(value: Optional[T], what: str = "value") -> T:
    """Return ``value`` or raise FatalRequestError if it is None."""
    if value is None:
        raise FatalRequestError(f"called unwrap on a missing {what}")
    return value


def divide(a: int, b: int) -> Optional[int]:
    """Integer division truncating toward zero; None when dividing by zero."""
    if b == 0:
        return None
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def parse_int32(s: str) -> int:
    """Parse a signed 32-bit decimal integer.

    Only an optional sign followed by ASCII digits is accepted: no
    whitespace, no ``_`` separators, no other Unicode digits.

    Raises:
        ValueError: If ``s`` is not such an integer or is out of range
    """
    if not s:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(s):
        raise ValueError(f"invalid digit found in {s!r}")
    num = int(s)
    if num > I32_MAX:
        raise ValueError(f"number too large to fit in target type: {s!r}")
    if num < I32_MIN:
        raise ValueError(f"number too small to fit in target type: {s!r}")
    return num


def parse_and_double(s: str) -> int:
    try:
        num = parse_int32(s)
    except ValueError as e:
        raise FatalRequestError(f"called unwrap on a parse error: {e}") from None
    doubled = unwrap(divide(num, 2), "quotient")
    return doubled * 2


def read_config_file(path: Union[str, Path]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FatalRequestError(f"called unwrap on an I/O error: {e}") from e


def get_nested_value(data: Optional[tuple]) -> int:
    """Unwrap three layers of optional; any missing layer is fatal.

    Layers are modelled as nested one-element tuples, so ``((42,),)`` holds a
    value and ``((None,),)`` is missing at the innermost layer.
    """
    first = unwrap(data, "outer layer")
    second = unwrap(first[0], "middle layer")
    return unwrap(second[0], "inner layer")


def get_element(values: Sequence[T], index: int) -> T:
    if not 0 <= index < len(values):
        raise FatalRequestError(f"called unwrap on an out-of-bounds index {index} (len {len(values)})")
    return values[index]


def divide_safe(a: int, b: int) -> ProcessResult:
    quotient = divide(a, b)
    if quotient is None:
        return ProcessResult.fail("Division by zero")
    return ProcessResult.ok(quotient)


def parse_and_double_safe(s: str) -> ProcessResult:
    try:
        num = parse_int32(s)
    except ValueError as e:
        return ProcessResult.fail(f"Parse error: {e}")
    halved = divide_safe(num, 2)
    if not halved.is_ok:
        return ProcessResult.fail(f"Division error: {halved.error}")
    return ProcessResult.ok(halved.value * 2)


def read_config_file_safe(path: Union[str, Path]) -> ProcessResult:
    try:
        return ProcessResult.ok(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return ProcessResult.fail(str(e))


def get_element_safe(values: Sequence[T], index: int) -> ProcessResult:
    if not 0 <= index < len(values):
        return ProcessResult.fail(f"Index {index} out of bounds for length {len(values)}")
    return ProcessResult.ok(values[index])
