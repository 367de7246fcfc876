import typing as ty

import click
from rich.console import Console

from alternating_iter.alternating import Alternating
from alternating_iter.alternating_all import AlternatingAll
from alternating_iter.alternating_no_remainder import AlternatingNoRemainder
from alternating_iter.base import AlternatingAdapter
from alternating_iter._version import version


MODES: ty.Dict[str, ty.Callable[..., AlternatingAdapter[str]]] = {
    "alternate": Alternating,
    "all": AlternatingAll,
    "no-remainder": AlternatingNoRemainder,
}


def _lines(file_obj: ty.TextIO) -> ty.Iterator[str]:
    return (line.rstrip("\n") for line in file_obj)


@click.command()
@click.argument("left", type=click.File("r"))
@click.argument("right", type=click.File("r"))
@click.option(
    "--mode",
    type=click.Choice(list(MODES)),
    default="alternate",
    show_default=True,
    help="What to do once one of the files runs out of lines.",
)
@click.option(
    "--count", is_flag=True, help="Only print the number of lines produced."
)
@click.option(
    "--verbose", "-v", is_flag=True,
    help="Describe the adapter state on stderr when done.",
)
@click.version_option(version, prog_name="altiter")
def altiter(left, right, mode, count, verbose):
    """Interleaves the lines of LEFT and RIGHT, starting with LEFT.

    Either may be '-' to read standard input. In the default
    'alternate' mode, output ends at the first turn whose file has no
    more lines.
    """
    adapter = MODES[mode](_lines(left), _lines(right))
    num_lines = 0
    for line in adapter:
        num_lines += 1
        if not count:
            click.echo(line)
    if count:
        click.echo(num_lines)
    if verbose:
        title = click.style(f"altiter {version}", fg="green")
        click.echo(f"{title}: {num_lines} lines, mode '{mode}'", err=True)
        Console(stderr=True, color_system=None).print(adapter)
