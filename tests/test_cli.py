import pytest

import cli
from bytesize import ErrorKind, ParseError


def _lines(capsys: pytest.CaptureFixture[str]):
    return capsys.readouterr().out.splitlines()


def test_parse(capsys: pytest.CaptureFixture[str]):
    cli.parse(['1.5 MB', '2gi', '103KB', '0'])
    assert _lines(capsys) == ['1500000', '2147483648', '103000', '0']


def test_parse_error():
    with pytest.raises(ParseError) as e:
        cli.parse(['1k', '1.2.3'])

    assert e.value.kind is ErrorKind.MULTIPLE_DECIMAL_POINT


def test_parse_range_error():
    with pytest.raises(ParseError) as e:
        cli.parse(['16EiB'])

    assert e.value.kind is ErrorKind.RANGE


def test_parse_clamp(capsys: pytest.CaptureFixture[str]):
    cli.parse(['16EiB', '1k'], clamp=True)
    assert _lines(capsys) == ['18446744073709551615', '1000']


def test_parse_clamp_keeps_other_errors():
    with pytest.raises(ParseError) as e:
        cli.parse(['5 parsecs'], clamp=True)

    assert e.value.kind is ErrorKind.UNKNOWN_UNITS


def test_format(capsys: pytest.CaptureFixture[str]):
    cli.format_([0, 999, 1000, 9995, 18446744073709551615])
    assert _lines(capsys) == ['0 B', '999 B', '1.00 kB', '10.0 kB', '18.4 EB']


def test_format_out_of_range():
    with pytest.raises(ValueError, match='not in'):
        cli.format_([-1])


def test_launcher(capsys: pytest.CaptureFixture[str]):
    cli.launcher('format', '999500')
    assert _lines(capsys)[-1] == '1.00 MB'
