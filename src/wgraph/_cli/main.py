import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from wgraph._algorithms import StrongComponents
from wgraph._config import WgraphConfig, get_config
from wgraph._errors import WgraphError
from wgraph._graph import WeightedDirectedGraph
from wgraph._io import EuclideanHeuristic, read_transit_graph
from wgraph._shortest_path import ShortestPath, find_inadmissible_vertices

app = typer.Typer(no_args_is_help=True)

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgesOption = Annotated[
    Path | None,
    typer.Option("-e", "--edges", help="Path to transit edge file (defaults to [tool.wgraph].edges)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Weighted directed graph toolkit."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
        force=True,
    )


def _load_config() -> WgraphConfig:
    try:
        return get_config()
    except WgraphError as e:
        logger.error(str(e))  # noqa: TRY400
        raise typer.Exit(code=1) from e


def _load_graph(edges: Path | None, config: WgraphConfig) -> WeightedDirectedGraph[int]:
    """Read the transit graph from ``edges`` or the configured edge file."""
    path = edges or config.edges
    if path is None:
        logger.error("No edge file given, use --edges or set [tool.wgraph].edges")
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Loading graph from:[/cyan] {path}")
    try:
        return read_transit_graph(path, config.weights)
    except (OSError, WgraphError) as e:
        logger.error(str(e))  # noqa: TRY400
        raise typer.Exit(code=1) from e


@app.command()
def info(edges: EdgesOption = None) -> None:
    """Show vertex count, edge count and total weight of a transit graph."""
    config = _load_config()
    graph = _load_graph(edges, config)

    table = Table(show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Vertices", str(graph.number_of_vertices))
    table.add_row("Directed edges", str(graph.number_of_edges))
    table.add_row("Sum of all weights", str(graph.total_weight))
    out_console.print(table)


@app.command()
def components(edges: EdgesOption = None) -> None:
    """List the strongly connected components of a transit graph."""
    config = _load_config()
    graph = _load_graph(edges, config)
    strong_components = StrongComponents(graph)

    table = Table()
    table.add_column("Component", justify="right", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Vertices")
    for component_id, members in strong_components.components.items():
        table.add_row(str(component_id), str(len(members)), ", ".join(str(v) for v in members))

    out_console.print(
        Panel(
            table,
            title=f"[bold]{strong_components.number_of_components} strong component(s)[/bold]",
            border_style="cyan",
        ),
    )


@app.command()
def path(  # noqa: PLR0913
    source: Annotated[int, typer.Argument(help="Start vertex")],
    goal: Annotated[int, typer.Argument(help="Goal vertex")],
    *,
    edges: EdgesOption = None,
    coordinates: Annotated[
        Path | None,
        typer.Option("-c", "--coordinates", help="Coordinate file enabling A* (defaults to [tool.wgraph].coordinates)"),
    ] = None,
    scale: Annotated[
        float | None,
        typer.Option("--scale", min=0.0, help="Heuristic scale (defaults to [tool.wgraph].heuristic_scale)"),
    ] = None,
    dijkstra: Annotated[
        bool,
        typer.Option("--dijkstra", help="Ignore coordinates and run Dijkstra"),
    ] = False,
    check_admissible: Annotated[
        bool,
        typer.Option("--check-admissible", help="Warn if the scaled heuristic overestimates costs to the goal"),
    ] = False,
) -> None:
    """Find a shortest path between two vertices of a transit graph."""
    config = _load_config()
    graph = _load_graph(edges, config)
    heuristic_scale = config.heuristic_scale if scale is None else scale

    heuristic: EuclideanHeuristic | None = None
    coordinates_path = None if dijkstra else coordinates or config.coordinates
    if coordinates_path is not None:
        err_console.print(f"[cyan]Loading coordinates from:[/cyan] {coordinates_path}")
        try:
            heuristic = EuclideanHeuristic.from_file(coordinates_path)
        except (OSError, WgraphError) as e:
            logger.error(str(e))  # noqa: TRY400
            raise typer.Exit(code=1) from e

    search = ShortestPath(graph, heuristic, scale=heuristic_scale)
    err_console.print(f"[cyan]Searching with:[/cyan] {'Dijkstra' if search.is_dijkstra else 'A*'}")
    try:
        search.search_shortest_path(source, goal)
        distance = search.get_distance()
        vertices = search.get_shortest_path()
    except WgraphError as e:
        logger.error(str(e))  # noqa: TRY400
        raise typer.Exit(code=1) from e

    if heuristic is not None and check_admissible:
        try:
            inadmissible = find_inadmissible_vertices(graph, heuristic, goal, heuristic_scale)
        except WgraphError as e:
            logger.error(f"Cannot check the heuristic: {e}")  # noqa: TRY400
            raise typer.Exit(code=1) from e
        if inadmissible:
            logger.warning(
                f"Heuristic scale {heuristic_scale} overestimates the remaining cost at "
                f"{len(inadmissible)} vertices, the path may not be optimal",
            )

    out_console.print(f"Distance = {distance}")
    out_console.print(" -> ".join(str(v) for v in vertices))


def main() -> None:
    app()
