from types import MappingProxyType

MAX = 2**64 - 1

# 포맷 출력 순서 (kilo .. yotta)
LETTERS = 'kMGTPEZY'

PREFIXES = MappingProxyType({
    c: m
    for m, letter in enumerate(LETTERS, start=1)
    for c in (letter.lower(), letter.upper())
})


def magnitude(letter: str) -> int:
    """Prefix magnitude (1..8); 0 if `letter` is not a prefix."""
    return PREFIXES.get(letter, 0)