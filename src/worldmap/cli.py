"""CLI for worldmap."""

from __future__ import annotations

from pathlib import Path

import click
import networkx as nx

from worldmap import __version__
from worldmap.layout import classify_edges, compute_layout
from worldmap.layout.audit import audit_exits
from worldmap.layout.connectivity import exit_graph
from worldmap.log import configure_logging
from worldmap.parser import parse_snapshot
from worldmap.parser.model import DEFAULT_AREA, Location, locations_in_area
from worldmap.render import render_svg
from worldmap.themes import THEMES


def _load(input_file: Path, area: str | None) -> list[Location]:
    try:
        locations = parse_snapshot(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)
    if area is not None:
        locations = locations_in_area(locations, area)
    return locations


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default="WARNING",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"],
                                case_sensitive=False),
              help="Logging level (default: WARNING)")
def cli(log_level: str) -> None:
    """worldmap: Lay out and route game world maps from location snapshots."""
    configure_logging(log_level)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="parchment",
              help="Visual theme (default: parchment)")
@click.option("--width", type=int, default=800, help="Viewport width in pixels")
@click.option("--height", type=int, default=600, help="Viewport height in pixels")
@click.option("--marker-size", type=float, default=10.0,
              help="Location marker diameter in pixels (default: 10)")
@click.option("--area", default=DEFAULT_AREA,
              help="Area to render (default: overworld)")
@click.option("--focus", default=None,
              help="Focused location ID; shows its one-way connections")
@click.option("--padding", type=click.FloatRange(0.0, 0.5, max_open=True),
              default=0.15, help="Fraction of the viewport kept empty per side")
@click.option("--title", default="", help="Map title")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: int,
    height: int,
    marker_size: float,
    area: str,
    focus: str | None,
    padding: float,
    title: str,
) -> None:
    """Render a location snapshot to an SVG preview."""
    locations = _load(input_file, area)

    svg = render_svg(locations, THEMES[theme], width=width, height=height,
                     marker_diameter=marker_size, focused_id=focus, title=title,
                     padding=padding)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(locations)} locations, "
               f"{len(classify_edges(locations))} connections -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--area", default=None, help="Only check one area")
@click.option("--strict", is_flag=True, default=False,
              help="Exit non-zero when data-quality findings are reported")
def validate(input_file: Path, area: str | None, strict: bool) -> None:
    """Validate a location snapshot and report exit problems."""
    locations = _load(input_file, area)
    layout = compute_layout(locations)
    findings = audit_exits(locations, layout.grid_positions)

    if findings:
        click.echo("Findings:", err=True)
        for finding in findings:
            click.echo(f"  - [{finding.kind}] {finding.message}", err=True)
        if strict:
            raise SystemExit(1)

    click.echo(f"Valid: {len(locations)} locations, "
               f"{len(classify_edges(locations))} connections, "
               f"{len(findings)} findings")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--area", default=None, help="Only describe one area")
def info(input_file: Path, area: str | None) -> None:
    """Show information about a location snapshot."""
    locations = _load(input_file, area)
    layout = compute_layout(locations)
    edges = classify_edges(locations)
    two_way = sum(1 for e in edges if e.is_two_way)

    areas: dict[str, int] = {}
    for loc in locations:
        areas[loc.area_id] = areas.get(loc.area_id, 0) + 1

    G = exit_graph(locations)
    components = nx.number_weakly_connected_components(G) if len(G) else 0
    stored = sum(1 for loc in locations if loc.has_stored_coords)
    obstacles = sum(1 for loc in locations if loc.is_obstacle)

    click.echo(f"Locations: {len(locations)} ({stored} with stored coordinates)")
    click.echo(f"Areas: {len(areas)}")
    for area_id, count in areas.items():
        click.echo(f"  {area_id}: {count} locations")
    click.echo(f"Connections: {len(edges)} ({two_way} two-way, "
               f"{len(edges) - two_way} one-way)")
    click.echo(f"Components: {components}")
    click.echo(f"Obstacles: {obstacles}")
    b = layout.bounds
    click.echo(f"Grid: x {b.min_x}..{b.max_x}, y {b.min_y}..{b.max_y}")
