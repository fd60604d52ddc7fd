from enum import StrEnum

from bytesize.prefix import MAX


class ErrorKind(StrEnum):
    MISSING_NUMBER = 'missing number'
    MULTIPLE_DECIMAL_POINT = 'multiple decimal points'
    UNKNOWN_UNITS = 'unknown units'
    INVALID_NUMBER = 'invalid number'
    RANGE = 'byte size out of range'


class ParseError(ValueError):
    """
    Byte size 문자열 해석 오류.

    `RANGE` 오류는 `saturated`로 표현 가능한 최댓값을 함께 전달한다.
    """

    def __init__(self, text: str, kind: ErrorKind) -> None:
        super().__init__(text, kind)
        self.text = text
        self.kind = kind

    def __str__(self) -> str:
        return f'parse {self.text!r}: {self.kind}'

    @property
    def saturated(self) -> int | None:
        return MAX if self.kind is ErrorKind.RANGE else None
