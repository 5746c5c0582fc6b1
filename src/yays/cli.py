"""Command-line entry point: ``yays`` (Yet Another YAML Sorter)."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from yays import __version__
from yays.api import sort_file, write_file
from yays.errors import YaysError
from yays.ordering.config import SortMode

PATH_HELP = (
    "YAML path in dot notation. Bracket selectors [*] and [N] may appear at "
    "the end or mid-path to loop over sequences or mappings with [*], or to "
    "index sequences with [N] (e.g. 'items[*].meta', 'servers[0].roles'). "
    "At the target, mappings have their keys sorted and sequences are sorted "
    "by the first field of each element. Repeat -p to process several paths "
    "in order."
)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--file",
    "-f",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Input YAML file path.",
)
@click.option(
    "--yaml-path", "-p", "yaml_paths", required=True, multiple=True, help=PATH_HELP
)
@click.option(
    "--write",
    "-w",
    is_flag=True,
    help="Write changes back to the input file instead of printing to stdout.",
)
@click.option(
    "--sort",
    "-t",
    "sort_mode",
    type=click.Choice([mode.value for mode in SortMode]),
    default=SortMode.ALPHANUMERIC.value,
    show_default=True,
    help="Sort type for mapping keys: 'human' puts common keys first, then "
    "the rest alphanumerically.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Print the result even when writing, and log progress to stderr.",
)
@click.version_option(__version__, "--version", "-V", prog_name="yays")
def main(
    input_file: Path,
    yaml_paths: tuple[str, ...],
    write: bool,
    sort_mode: str,
    verbose: bool,
) -> None:
    """Yet Another YAML Sorter.

    Sorts mapping keys and sequence elements at the given paths of a YAML
    file, keeping comments and indentation.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = sort_file(input_file, yaml_paths, mode=sort_mode)
        if verbose or not write:
            click.echo(result, nl=False)
        if write:
            write_file(input_file, result)
    except YaysError as exc:
        raise click.ClickException(str(exc)) from exc
    except OSError as exc:
        raise click.ClickException(f"failed to access {input_file}: {exc}") from exc
