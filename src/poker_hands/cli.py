"""Command-line interface for evaluating showdowns."""

import json
import logging

import click

from .config import config as named_configs, get_config
from .showdown import ErrorPolicy, LineError, run_showdown

logger = logging.getLogger(__name__)


def setup_logging(level: str, log_format: str) -> None:
    """Send log records to stderr so stdout only carries results."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=log_format,
        handlers=[logging.StreamHandler()],
        force=True,
    )


@click.command()
@click.argument('input_file', metavar='INPUT', type=click.File('r'), default='-')
@click.option('--config', 'config_name', type=click.Choice(list(named_configs)), default=None,
              help='Configuration to use')
@click.option('--on-error', type=click.Choice([p.value for p in ErrorPolicy]), default=None,
              help='What to do with lines that fail to parse')
@click.option('--strict', is_flag=True, help='Reject card codes longer than two characters')
@click.option('--separator', default=None, help='Character between hands on a line')
@click.option('--log-level', default=None, help='Logging level (DEBUG, INFO, WARNING, ...)')
@click.option('--json', 'as_json', is_flag=True, help='Print one JSON object per line')
def cli(input_file, config_name, on_error, strict, separator, log_level, as_json):
    """Find the winning hand(s) on each line of INPUT.

    Each line holds five card hands separated by '|', e.g.
    "2C 3C 6C 9C AC|KD AS 2C 6D QS".
    """
    cfg = get_config(config_name)
    setup_logging(log_level or cfg.LOG_LEVEL, cfg.LOG_FORMAT)

    try:
        policy = ErrorPolicy(on_error or cfg.ON_ERROR)
    except ValueError:
        choices = ", ".join(p.value for p in ErrorPolicy)
        raise click.ClickException(f"Invalid error policy '{cfg.ON_ERROR}', expected one of: {choices}")
    strict = strict or cfg.STRICT_CARDS
    separator = separator or cfg.HAND_SEPARATOR
    if not separator:
        raise click.ClickException("Hand separator must not be empty")
    logger.debug(f"Running with policy={policy.value} strict={strict} separator={separator!r}")

    try:
        for outcome in run_showdown(input_file, on_error=policy, strict=strict, separator=separator):
            if as_json:
                click.echo(json.dumps(outcome.to_json()))
            else:
                click.echo(outcome.format())
    except LineError as e:
        raise click.ClickException(str(e))


if __name__ == '__main__':
    cli()
