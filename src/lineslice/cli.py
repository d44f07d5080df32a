"""lineslice CLI - print a slice of lines from a file."""

import logging
import sys
from contextlib import ExitStack

import click
import yaml

from lineslice.config import LOG_LEVELS, SliceConfig
from lineslice.core.spec import SliceSpec
from lineslice.errors import LineSliceError, SliceParseError
from lineslice.io import LineSink, LineSource
from lineslice.slicer import StreamSlicer

logger = logging.getLogger(__name__)

EPILOG = """\b
BEGIN and END may be any combination of positive (denoting position
from the beginning) or negative (denoting position from the end) numbers.

\b
Both LF and CRLF are recognized as newline characters.
Newlines are not preserved and are always replaced with LF in output.
Last line of the output will always end with LF.
"""


class SliceSpecParam(click.ParamType):
    """Click parameter type for ``BEGIN:END`` expressions."""

    name = "BEGIN:END"

    def convert(self, value, param, ctx) -> SliceSpec:
        if isinstance(value, SliceSpec):
            return value
        try:
            return SliceSpec.parse(value)
        except SliceParseError as e:
            self.fail(f'Failed to parse slice "{value}": {e}', param, ctx)


SLICE_SPEC = SliceSpecParam()


@click.command(context_settings={"help_option_names": ["-h", "--help"]}, epilog=EPILOG)
@click.version_option(None, "-v", "--version", package_name="lineslice")
@click.option("--slice", "-s", "spec", type=SLICE_SPEC, help="Slice to print, as BEGIN:END")
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False), help="Path to YAML config")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override the configured log level",
)
@click.argument("file", required=False, default="-", type=click.Path(allow_dash=True))
def main(spec: SliceSpec | None, config_path: str | None, log_level: str | None, file: str) -> None:
    """Print slice from FILE to standard output.

    When slice is not specified, print whole file to standard output.
    FILE defaults to standard input.
    """
    try:
        config = SliceConfig.load(config_path) if config_path else SliceConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f'Failed to load config "{config_path}": {e}') from e

    if log_level:
        config.log_level = log_level.upper()
    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    spec = spec or SliceSpec()
    source = LineSource(
        file,
        stream=sys.stdin.buffer,
        encoding=config.encoding,
        errors=config.errors,
    )
    sink = LineSink(sys.stdout.buffer, encoding=config.encoding, errors=config.errors)

    with ExitStack() as stack:
        try:
            stack.enter_context(source)
        except OSError as e:
            raise click.ClickException(f'Failed to open file "{file}": {e}') from e

        try:
            stats = StreamSlicer(spec).run(source, sink)
            sink.flush()
        except (LineSliceError, OSError) as e:
            raise click.ClickException(f"Failed to perform slice: {e}") from e

    logger.info(
        "%s %s: read %d lines, wrote %d",
        source.name,
        spec,
        stats.lines_read,
        stats.lines_emitted,
    )


if __name__ == "__main__":
    main()
