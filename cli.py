from typing import Annotated

from cyclopts import App, Group, Parameter
from loguru import logger
from rich.markup import escape

from bytesize import ErrorKind, ParseError, format_size, parse_size, utils

app = App(help_format='markdown')
app.meta.group_parameters = Group('Options', sort_key=0)


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
):
    utils.set_logger(level=10 if debug else 20)

    return app(tokens)


@app.command
def parse(texts: list[str], *, clamp: bool = False):
    """
    용량 문자열을 byte 수로 변환.

    Parameters
    ----------
    texts : list[str]
        e.g. '1.5 MB', '2GiB', '103k'
    clamp : bool, optional
        범위 초과 시 오류 대신 최댓값 (2**64 - 1) 출력.
    """
    for text in texts:
        try:
            size = parse_size(text)
        except ParseError as e:
            if not (clamp and e.kind is ErrorKind.RANGE):
                logger.error('{}', escape(str(e)))
                raise

            logger.warning('{} | clamped to {}', escape(str(e)), e.saturated)
            size = e.saturated

        logger.debug('{} -> {}', escape(repr(text)), size)
        utils.cnsl.print(size, highlight=False)


@app.command(name='format')
def format_(sizes: list[int]):
    """byte 수를 3 significant digits 용량 문자열로 변환."""
    for size in sizes:
        utils.cnsl.print(format_size(size), highlight=False)


def main():
    app.meta()


if __name__ == '__main__':
    main()
