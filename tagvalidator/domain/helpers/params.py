"""Rule parameter conversion helpers.

Annotation parameters are raw strings. These helpers convert them to the
numeric type a rule compares against and raise ``BadParameterError`` when
the conversion is impossible.
"""

import re

from ..exceptions import BadParameterError

# Leading-zero literals such as "010" are octal
_LEGACY_OCTAL = re.compile(r"[+-]?0_?[0-7][0-7_]*")


def as_int(param: str) -> int:
    """Convert a parameter to int.

    Integer literal prefixes (``0x``, ``0o``, ``0b``) are accepted, a bare
    leading zero means octal and underscores may separate digits.

    Args:
        param: Raw parameter string

    Returns:
        Converted integer

    Raises:
        BadParameterError: If param is not an integer literal

    Examples:
        >>> as_int("10")
        10
        >>> as_int("0x10")
        16
        >>> as_int("010")
        8
        >>> as_int("")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        BadParameterError: bad parameter
    """
    text = param.strip()
    try:
        if _LEGACY_OCTAL.fullmatch(text):
            return int(text, 8)
        return int(text, 0)
    except ValueError as err:
        raise BadParameterError() from err


def as_float(param: str) -> float:
    """Convert a parameter to float.

    Args:
        param: Raw parameter string

    Returns:
        Converted float

    Raises:
        BadParameterError: If param is not a number

    Examples:
        >>> as_float("1.5")
        1.5
        >>> as_float("not_float")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        BadParameterError: bad parameter
    """
    try:
        return float(param)
    except ValueError as err:
        raise BadParameterError() from err


def as_number(param: str) -> float:
    """Convert a parameter to int when possible, otherwise float.

    Used for comparisons against float values so ``min=0x10`` still works.
    Leading-zero parameters stay decimal here, so ``min=010`` is 10.0.

    Raises:
        BadParameterError: If param is not a number
    """
    if _LEGACY_OCTAL.fullmatch(param.strip()):
        return as_float(param)
    try:
        return as_int(param)
    except BadParameterError:
        return as_float(param)
