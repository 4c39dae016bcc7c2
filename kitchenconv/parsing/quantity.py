import math
import re

from ..errors import NumberFormatError

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _invalid(token: str) -> NumberFormatError:
    return NumberFormatError(f"could not convert '{token}' into a number")


def _parse_unsigned(part: str, token: str) -> int:
    if not _UNSIGNED_INT.fullmatch(part):
        raise _invalid(token)
    try:
        return int(part)
    except ValueError:
        # too many digits for int()
        raise _invalid(token) from None


def parse_quantity(token: str) -> float:
    """
    Parse a quantity token into a float.

    Accepts plain numbers ("2", "0.5", "1e3") and fractions of
    non-negative integers ("3/4", "+3/4"). Anything trailing is rejected,
    as is any value that does not fit a finite float.
    """
    if "/" in token:
        num, _, den = token.partition("/")
        up = _parse_unsigned(num, token)
        low = _parse_unsigned(den, token)
        if low == 0:
            raise NumberFormatError(f"could not convert '{token}' into a number (zero denominator)")
        try:
            value = up / low
        except OverflowError:
            raise _invalid(token) from None
    else:
        if not _DECIMAL.fullmatch(token):
            raise _invalid(token)
        value = float(token)

    if not math.isfinite(value):
        raise _invalid(token)
    return value
