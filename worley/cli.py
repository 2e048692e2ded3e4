"""
cli.py

Command line front end: compute a noise field or list its feature points
and print the result as rich tables.
"""

from typing import Optional

import typer
from jsonschema import ValidationError
from rich.console import Console
from rich.table import Table

from worley.config import load_config, setup_logging
from worley.features import generate_feature_points
from worley.noise import field_summary, validate_arguments, worley_noise_3d

app = typer.Typer(help="3D Worley (cellular) noise.")
console = Console()


def _resolve_config(config_file, size, grid_size, seed):
    try:
        config = load_config(config_file)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {getattr(e, 'message', e)}")
        raise typer.Exit(code=1)

    if size is not None:
        config.size = size
    if grid_size is not None:
        config.grid_size = grid_size
    if seed is not None:
        config.seed = seed
    return config


@app.command()
def generate(
    size: Optional[int] = typer.Option(None, "--size", "-s", help="Samples along each axis."),
    grid_size: Optional[int] = typer.Option(None, "--grid-size", "-g", help="Lattice cells along each axis."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for feature point placement."),
    no_clamp: bool = typer.Option(False, "--no-clamp", help="Do not clip intensities to [0, 1]."),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Threads for the distance field."),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a JSON config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output."),
):
    """
    Compute a noise field and print summary statistics.
    """
    logger = setup_logging(verbose)
    config = _resolve_config(config_file, size, grid_size, seed)
    if no_clamp:
        config.clamp = False
    if workers is not None:
        config.workers = workers

    logger.debug(f"Generating noise with {config}")

    try:
        field = worley_noise_3d(
            config.size,
            config.grid_size,
            seed=config.seed,
            clamp=config.clamp,
            workers=config.workers,
            progress=verbose,
        )
    except (TypeError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    summary = field_summary(field)

    table = Table(title="Worley Noise Field")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="magenta")

    table.add_row("size", str(config.size))
    table.add_row("grid_size", str(config.grid_size))
    table.add_row("seed", str(config.seed))
    table.add_row("clamp", str(config.clamp))
    for key, value in summary.items():
        table.add_row(key, f"{value:.4f}" if isinstance(value, float) else str(value))

    console.print(table)


@app.command()
def points(
    size: Optional[int] = typer.Option(None, "--size", "-s", help="Samples along each axis."),
    grid_size: Optional[int] = typer.Option(None, "--grid-size", "-g", help="Lattice cells along each axis."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for feature point placement."),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a JSON config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output."),
):
    """
    List the feature point of every lattice cell.
    """
    setup_logging(verbose)
    config = _resolve_config(config_file, size, grid_size, seed)

    try:
        validate_arguments(config.size, config.grid_size)
        feature_points = generate_feature_points(config.size, config.grid_size, seed=config.seed)
    except (TypeError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"Feature Points ({len(feature_points)})")
    table.add_column("Cell", justify="right", style="cyan", no_wrap=True)
    table.add_column("x", justify="right", style="green")
    table.add_column("y", justify="right", style="green")
    table.add_column("z", justify="right", style="green")

    for index, (x, y, z) in enumerate(feature_points):
        table.add_row(str(index), str(x), str(y), str(z))

    console.print(table)


if __name__ == "__main__":
    app()
