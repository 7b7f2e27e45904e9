__all__ = ["app"]

from typing import Annotated

import typer
from returns.result import Failure, Success

from .key import KeyMode, parse_keys

app = typer.Typer()


@app.command(context_settings={"ignore_unknown_options": True})
def dimkey(
    keys: Annotated[
        str,
        typer.Argument(
            show_default=False,
            help="The keys to inspect, one per dimension and separated by commas, e.g. 1, :4, ::2.",
        ),
    ],
    sizes: Annotated[
        list[int],
        typer.Option(
            "--size",
            "-s",
            help=(
                "The size of a dimension. Mention once per key to also print each Range key with "
                "its unspecified fields filled in."
            ),
        ),
    ] = [],  # noqa: B006; Typer does not support Sequence or tuple
    deparse: Annotated[
        bool,
        typer.Option(
            "--deparse",
            "-d",
            help="Print keys in subscript syntax, e.g. 1:4:2, instead of Range(1, 4, 2).",
        ),
    ] = False,
):
    # Parse keys
    match parse_keys(keys):
        case Failure(error):
            typer.echo(f"Failed to parse keys:\n{error}", err=True)
            raise typer.Exit(1)
        case Success(parsed_keys):
            pass
        case _:
            raise NotImplementedError()

    if len(sizes) > 0 and len(sizes) != len(parsed_keys):
        typer.echo(
            f"Expected one size per key, but got {len(sizes)} sizes for {len(parsed_keys)} keys",
            err=True,
        )
        raise typer.Exit(1)

    def render(key):
        return key.deparse() if deparse else str(key)

    for i, key in enumerate(parsed_keys):
        if len(sizes) > 0 and key.mode == KeyMode.range:
            resolved = key.resolve_against_size(sizes[i])
            typer.echo(f"{render(key)} -> {render(resolved)}")
        else:
            typer.echo(render(key))
