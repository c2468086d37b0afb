"""Command-line interface for LightMap."""

import locale
import logging
import click
from pathlib import Path
from .error_handler import ErrorHandler
from .light_map import LightMap
from .parser import LightMapParser
from .types import LightMapError


def _fail(ctx: click.Context, error: LightMapError) -> None:
    """Report error with its suggested fix and exit with status 1."""
    response = ctx.obj["parser"].error_handler.handle_error(error)
    click.echo(f"Error: {error}", err=True)
    click.echo(f"Suggestion: {response.suggested_action}", err=True)
    ctx.exit(1)


def _load(ctx: click.Context, input_file: Path) -> LightMap:
    parser: LightMapParser = ctx.obj["parser"]
    try:
        return parser.parse(input_file.read_text(encoding='utf-8'))
    except LightMapError as e:
        _fail(ctx, e)


def _emit(ctx: click.Context, produce) -> None:
    try:
        click.echo(produce())
    except LightMapError as e:
        _fail(ctx, e)


@click.group()
@click.version_option(version=LightMap.version(), message="%(version)s")
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--shallow', is_flag=True, help='Do not turn nested pair lists into maps')
@click.pass_context
def main(ctx: click.Context, verbose: bool, shallow: bool):
    """LightMap - inspect and convert JSON arrays of [key, value] pairs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logging.getLogger(__name__).warning(f"Falling back to the C collation: {e}")
    ctx.ensure_object(dict)
    ctx.obj["parser"] = LightMapParser(
        error_handler=ErrorHandler(),
        options={"deep_transform_to_map": not shallow}
    )


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def show(ctx: click.Context, input_file: Path):
    """Print the map in compact array-of-pairs form."""
    light_map = _load(ctx, input_file)
    _emit(ctx, light_map.to_string)


@main.command(name='to-object')
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--indent', '-i', type=int, default=None, help='Indentation for the JSON output')
@click.pass_context
def to_object(ctx: click.Context, input_file: Path, indent: int):
    """Print the map as a plain nested JSON object."""
    light_map = _load(ctx, input_file)
    parser: LightMapParser = ctx.obj["parser"]
    _emit(ctx, lambda: parser.dumps(light_map.to_object(), indent=indent))


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--by', type=click.Choice(['keys', 'values']), default='keys',
              help='Sort by keys (default) or by values')
@click.option('--reverse', '-r', is_flag=True, help='Sort in descending order')
@click.pass_context
def sort(ctx: click.Context, input_file: Path, by: str, reverse: bool):
    """Print the map sorted by key or by value."""
    light_map = _load(ctx, input_file)
    if by == 'values':
        result = light_map.sort_values(reverse=reverse)
    else:
        result = light_map.sort_keys(reverse=reverse)
    _emit(ctx, result.to_string)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('template')
@click.pass_context
def substitute(ctx: click.Context, input_file: Path, template: str):
    """Replace each key found in TEMPLATE with its value."""
    light_map = _load(ctx, input_file)
    click.echo(light_map.substitute_into(template))


if __name__ == '__main__':
    main()
