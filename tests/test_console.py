from pathlib import Path

import pytest
from loguru import logger

from bytesize import utils


@pytest.mark.parametrize(
    ('level', 'expected'),
    [('trace', 5), ('DEBUG', 10), ('info', 20), ('Success', 25), (30, 30), (15, 15)],
)
def test_log_level(level: int | str, expected: int):
    assert utils.log_level(level) == expected


def test_log_level_unknown():
    with pytest.raises(KeyError, match='verbose'):
        utils.log_level('verbose')


def test_set_logger_file(tmp_path: Path):
    path = tmp_path / 'bytesize.log'
    utils.set_logger('WARNING', log_file=path)

    logger.debug('hidden below file level')
    logger.info('1.00 kB | 1000')
    logger.remove()

    text = path.read_text(encoding='UTF-8-SIG')
    assert '1.00 kB | 1000' in text
    assert 'hidden' not in text


def test_set_logger_console(capsys: pytest.CaptureFixture[str]):
    utils.set_logger(20)

    logger.debug('hidden')
    logger.warning('clamped')

    out = capsys.readouterr().out
    assert 'clamped' in out
    assert 'hidden' not in out
