import functools

from bytesize.parse import parse_size
from bytesize.prefix import LETTERS, MAX


def _divide(size: int) -> tuple[int, int, int, bool]:
    """
    1000 미만이 될 때까지 (최대 yotta) 1000으로 나눔.

    Returns
    -------
    tuple[int, int, int, bool]
        (몫, 마지막 나머지, prefix index, 앞서 버린 나머지 중 0이 아닌 값 존재 여부)
    """
    has_rem = False
    pfx = 0
    while True:
        size, rem = divmod(size, 1000)
        if size < 1000 or pfx + 1 == len(LETTERS):
            return size, rem, pfx, has_rem

        has_rem = has_rem or rem > 0
        pfx += 1


def _odd(x: int):
    return bool(x & 1)


def format_size(size: int) -> str:
    """
    3 significant digits + SI prefix 형식으로 변환.

    Round half to even (e.g. 1005 -> '1.00 kB', 1015 -> '1.02 kB').
    """
    if not 0 <= size <= MAX:
        msg = f'{size} not in [0, {MAX}]'
        raise ValueError(msg)

    if size < 1000:
        return f'{size} B'

    n, rem, pfx, has_rem = _divide(size)
    unit = f'{LETTERS[pfx]}B'

    if n < 10:
        m, r = divmod(rem, 10)
        if r > 5 or (r == 5 and (_odd(m) or has_rem)):
            m += 1
            if m == 100:
                m = 0
                n += 1
                if n == 10:
                    return f'10.0 {unit}'

        return f'{n}.{m:02d} {unit}'

    if n < 100:
        m, r = divmod(rem, 100)
        if r > 50 or (r == 50 and (_odd(m) or has_rem)):
            m += 1
            if m == 10:
                m = 0
                n += 1
                if n == 100:
                    return f'100 {unit}'

        return f'{n}.{m} {unit}'

    if rem > 500 or (rem == 500 and (_odd(n) or has_rem)):
        n += 1

    if n >= 1000 and pfx + 1 < len(LETTERS):
        return f'1.00 {LETTERS[pfx + 1]}B'

    return f'{n} {unit}'


@functools.total_ordering
class FileSize:
    __slots__ = ('_bytes',)

    def __init__(self, size: int) -> None:
        if not 0 <= size <= MAX:
            msg = f'{size} not in [0, {MAX}]'
            raise ValueError(msg)

        self._bytes = size

    @classmethod
    def parse(cls, text: str):
        return cls(parse_size(text))

    def __str__(self) -> str:
        return format_size(self._bytes)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._bytes})'

    def __int__(self) -> int:
        return self._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented

        return self._bytes == other._bytes

    def __lt__(self, other: 'FileSize') -> bool:
        if not isinstance(other, FileSize):
            return NotImplemented

        return self._bytes < other._bytes

    @property
    def size(self):
        return self._bytes
