"""
Byte size 문자열 해석.

e.g.
    >>> parse_size('555k')
    555000
    >>> parse_size('15 EiB')
    17293822569102704640
    >>> parse_size('0.001 zb')
    1000000000000000000
"""

import dataclasses as dc
import math

from loguru import logger

from bytesize.errors import ErrorKind, ParseError
from bytesize.prefix import MAX, magnitude

DIGITS = frozenset('0123456789')


@dc.dataclass(frozen=True)
class UnitSpec:
    magnitude: int = 0
    binary: bool = False


def _split(text: str) -> tuple[str, str, int]:
    """`text`를 (숫자, 단위, 소수점 위치)로 분리."""
    point = -1
    has_digit = False
    end = len(text)

    for i, c in enumerate(text):
        if c in DIGITS:
            has_digit = True
        elif c == '.':
            if point != -1:
                raise ParseError(text, ErrorKind.MULTIPLE_DECIMAL_POINT)
            point = i
        else:
            end = i
            break

    if not has_digit:
        raise ParseError(text, ErrorKind.MISSING_NUMBER)

    return text[:end], text[end:].lstrip(' '), point


def _unit(text: str, units: str) -> UnitSpec:
    if units[-1:] in {'b', 'B'}:
        units = units[:-1]

    match len(units):
        case 0:
            return UnitSpec()
        case 1:
            binary = False
        case 2 if units[1] in {'i', 'I'}:
            binary = True
        case _:
            raise ParseError(text, ErrorKind.UNKNOWN_UNITS)

    if not (m := magnitude(units[0])):
        raise ParseError(text, ErrorKind.UNKNOWN_UNITS)

    return UnitSpec(magnitude=m, binary=binary)


def _parse_binary(text: str, number: str, m: int) -> int:
    # binary prefix는 float를 거치므로 큰 소수 입력은 정확히 반올림되지 않을 수 있음
    try:
        f = float(number)
    except ValueError as e:
        raise ParseError(text, ErrorKind.INVALID_NUMBER) from e

    try:
        f = math.ldexp(f, m * 10)
    except OverflowError as e:
        raise ParseError(text, ErrorKind.RANGE) from e

    if f >= MAX + 1:
        raise ParseError(text, ErrorKind.RANGE)

    return round(f)


def _mul10(text: str, v: int) -> int:
    if v > MAX // 10:
        raise ParseError(text, ErrorKind.RANGE)

    return v * 10


def _round_up(v: int, frac: str) -> bool:
    if not frac:
        return False

    if frac[0] != '5':
        return frac[0] > '5'

    return bool(v & 1) or any(c != '0' for c in frac[1:])


def _parse_decimal(text: str, number: str, point: int, m: int) -> int:
    place = m * 3 + (point if point != -1 else len(number))
    digits = number.replace('.', '')

    v = 0
    frac = ''
    for i, c in enumerate(digits):
        if place <= 0:
            frac = digits[i:]
            break

        place -= 1
        v = _mul10(text, v) + int(c)
        if v > MAX:
            raise ParseError(text, ErrorKind.RANGE)

    for _ in range(place):
        v = _mul10(text, v)

    if _round_up(v, frac):
        v += 1
        if v > MAX:
            raise ParseError(text, ErrorKind.RANGE)

    return v


def parse_size(text: str) -> int:
    """
    Byte size 문자열을 byte 수로 변환.

    숫자와 단위 사이 공백(ASCII space) 허용. 단위는 SI prefix (k, M, G, ...)와
    binary prefix (ki, Mi, Gi, ...), 뒤에 선택적으로 'b'/'B'. 대소문자 무관.

    Parameters
    ----------
    text : str
        e.g. '1.5 mb', '2gi', '103KB'

    Returns
    -------
    int
        [0, 2**64 - 1] 범위의 byte 수. 소수는 round half to even.

    Raises
    ------
    ParseError
        형식 오류 또는 64 bit 범위 초과 (`ErrorKind.RANGE`).
    """
    number, units, point = _split(text)
    unit = _unit(text, units)

    if unit.binary:
        return _parse_binary(text, number, unit.magnitude)

    return _parse_decimal(text, number, point, unit.magnitude)


def parse_size_clamped(text: str) -> int:
    """`parse_size`와 같으나 범위 초과 시 최댓값 반환."""
    try:
        return parse_size(text)
    except ParseError as e:
        if e.saturated is None:
            raise

        logger.trace('Clamp {!r} to {}', text, e.saturated)
        return e.saturated
