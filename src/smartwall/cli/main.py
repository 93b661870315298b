"""Typer CLI for the smart wall configurator."""

import logging
from typing import Annotated

import typer

from smartwall.application import ConfiguratorSession, SessionSettings
from smartwall.cli.commands import validate_command
from smartwall.domain import (
    CATALOG_WIDTHS,
    AccessoryEnforcement,
    AccessoryRequirements,
    AccessorySlot,
    check_dimensions,
    is_quotable_width,
    normalize_dimension,
    recommend_modules,
)
from smartwall.infrastructure import (
    CompletionFormatter,
    DimensionReportFormatter,
    JsonExporter,
    PaletteFormatter,
    RecommendationFormatter,
    WallDiagramFormatter,
)

app = typer.Typer(
    name="smartwall",
    help="Plan modular wall panel layouts from wall dimensions.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log configurator decisions to stderr"),
    ] = False,
) -> None:
    """Smart wall configurator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _parse_module_token(token: str) -> int | AccessorySlot:
    """A plan token is a catalog width in mm or an accessory name."""
    lowered = token.strip().lower()
    if lowered in {slot.value for slot in AccessorySlot}:
        return AccessorySlot(lowered)
    if not lowered.isdigit() or int(lowered) not in CATALOG_WIDTHS:
        raise ValueError(
            f"'{token}' is not a module; use one of "
            f"{', '.join(str(w) for w in CATALOG_WIDTHS)}, tv or fire"
        )
    return int(lowered)


@app.command()
def check(
    width: Annotated[str, typer.Argument(help="Wall width, e.g. 5700 or 5.7m")],
    height: Annotated[str, typer.Argument(help="Wall height, e.g. 2500 or 2.5m")],
    tv: Annotated[bool, typer.Option("--tv", help="Wall will hold a TV")] = False,
    fire: Annotated[
        bool, typer.Option("--fire", help="Wall will hold a fireplace")
    ] = False,
) -> None:
    """Check wall dimensions against the catalog bounds.

    Exits 0 when valid, 2 when valid with warnings or when the width needs a
    custom quotation, and 1 otherwise.
    """
    requirements = AccessoryRequirements(has_tv=tv, has_fire=fire)
    result = check_dimensions(width, height, requirements)
    typer.echo(DimensionReportFormatter().format(result))

    if result.is_valid:
        raise typer.Exit(code=2 if result.warnings else 0)
    if result.is_oversize and result.is_height_valid:
        raise typer.Exit(code=2)
    raise typer.Exit(code=1)


@app.command()
def plan(
    width: Annotated[str, typer.Argument(help="Wall width, e.g. 5700 or 5.7m")],
    height: Annotated[str, typer.Argument(help="Wall height, e.g. 2500 or 2.5m")],
    modules: Annotated[
        list[str] | None,
        typer.Argument(
            help="Modules left to right: catalog widths in mm, or tv / fire "
            "for an accessory pair"
        ),
    ] = None,
    tv: Annotated[bool, typer.Option("--tv", help="Wall will hold a TV")] = False,
    fire: Annotated[
        bool, typer.Option("--fire", help="Wall will hold a fireplace")
    ] = False,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Treat missing accessory pairs as errors"),
    ] = False,
    quotation: Annotated[
        bool,
        typer.Option(
            "--quotation", help="Accept a custom quotation for walls over 6000mm"
        ),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
) -> None:
    """Place modules on a wall and show the resulting layout."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)

    try:
        steps = [_parse_module_token(token) for token in modules or []]
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    settings = SessionSettings(
        debounce_ms=0,
        accessory_enforcement=(
            AccessoryEnforcement.STRICT if strict else AccessoryEnforcement.ADVISORY
        ),
        allow_custom_quotation=quotation,
    )

    with ConfiguratorSession(settings) as session:
        session.set_accessories(has_tv=tv, has_fire=fire)
        session.enter_width(width)
        session.enter_height(height)

        if not session.is_active:
            typer.echo(DimensionReportFormatter().format(session.dimensions()), err=True)
            raise typer.Exit(code=1)

        refused = 0
        for step in steps:
            if isinstance(step, AccessorySlot):
                accepted = session.reserve_accessory(step)
                label = f"{step.label} pair"
            else:
                accepted = session.add_module(step)
                label = f"{step}mm module"
            if not accepted:
                refused += 1
                typer.echo(f"Refused: {label} does not fit", err=True)

        snapshot = session.snapshot()
        completion = session.completion()

        if output_format == "json":
            typer.echo(JsonExporter().export(snapshot, completion))
        else:
            typer.echo(WallDiagramFormatter().format(snapshot))
            typer.echo()
            typer.echo(PaletteFormatter().format(session.palette()))
            typer.echo()
            typer.echo(CompletionFormatter().format(completion))

    if refused or not completion.is_complete:
        raise typer.Exit(code=1)
    if completion.has_warnings:
        raise typer.Exit(code=2)


@app.command()
def recommend(
    width: Annotated[str, typer.Argument(help="Wall width, e.g. 5700 or 5.7m")],
    tv: Annotated[bool, typer.Option("--tv", help="Centre a TV pair")] = False,
    fire: Annotated[
        bool, typer.Option("--fire", help="Centre a fireplace pair")
    ] = False,
) -> None:
    """Suggest module runs that cover a wall width."""
    width_mm = normalize_dimension(width)
    if width_mm is None or not is_quotable_width(width_mm):
        typer.echo(f"Error: '{width}' is not a usable wall width", err=True)
        raise typer.Exit(code=1)

    requirements = AccessoryRequirements(has_tv=tv, has_fire=fire)
    configurations = recommend_modules(width_mm, requirements)
    typer.echo(RecommendationFormatter().format(width_mm, configurations))
    if not configurations:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
