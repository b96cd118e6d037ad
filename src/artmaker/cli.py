"""Typer CLI for artmaker."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from artmaker.config import DEFAULTS_PATH, load_config
from artmaker.core.errors import ArtmakerError, InvalidState, OutOfRange
from artmaker.core.rng import make_rng
from artmaker.engine.metrics import generation_record, save_metrics
from artmaker.evolution.population import Population
from artmaker.genetics.chromosome import Chromosome
from artmaker.genetics.phenotype import Phenotype
from artmaker.genetics.proteins import default_schema

app = typer.Typer(help="Breed digit-string genomes into drawings by picking the ones you like")
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log breeding details")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _summary(phenotype: Phenotype) -> str:
    shapes: dict[str, int] = {}
    for instr in phenotype.instructions:
        shapes[instr.shape] = shapes.get(instr.shape, 0) + 1
    return ", ".join(f"{n} {shape}" for shape, n in sorted(shapes.items())) or "blank"


def _gallery_table(population: Population, limit: int) -> Table:
    table = Table(title=f"Generation {population.generation_number}", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("digits", justify="right")
    table.add_column("fps", justify="right")
    table.add_column("background")
    table.add_column("animated")
    table.add_column("shapes")
    for idx, chromosome in enumerate(population.individuals[:limit]):
        phenotype = chromosome.express()
        r, g, b = (int(c) for c in phenotype.setup.background)
        table.add_row(
            str(idx),
            str(len(chromosome)),
            f"{phenotype.setup.frame_rate:.2f}",
            f"[on rgb({r},{g},{b})]      [/] {r},{g},{b}",
            "yes" if phenotype.setup.animated else "no",
            _summary(phenotype),
        )
    return table


def _parse_selection(answer: str, limit: int) -> list[int]:
    picks = []
    for token in answer.replace(",", " ").split():
        if not token.isdigit() or int(token) >= limit:
            raise typer.BadParameter(f"{token!r} is not an index between 0 and {limit - 1}")
        picks.append(int(token))
    return picks


@app.command()
def schema():
    """Show the protein catalogue that lays out every genome."""
    catalogue = default_schema()
    table = Table(title="Proteins")
    for column in ("ordinal", "name", "size", "repeating", "drawable"):
        table.add_column(column)
    for protein in catalogue:
        table.add_row(str(protein.ordinal), protein.name, str(protein.size), str(protein.repeating), str(protein.drawable))
    console.print(table)
    console.print(f"genome length: {catalogue.fixed_length}..{catalogue.max_length} digits")


@app.command()
def decode(genome: str = typer.Argument(..., help="Digit string to decode")):
    """Validate a genome and print the phenotype it decodes to."""
    try:
        chromosome = Chromosome.from_genome(genome.strip(), default_schema(), validate=True)
    except OutOfRange as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(chromosome.express().as_dict())


@app.command()
def evolve(
    config: Path = typer.Option(DEFAULTS_PATH, help="YAML config path"),
    seed: Optional[int] = typer.Option(None, help="Override seed"),
    size: Optional[int] = typer.Option(None, help="Override population size"),
    mutation_rate: Optional[float] = typer.Option(None, help="Override mutation rate"),
    generations: int = typer.Option(1, help="Number of generations to breed"),
    metrics: Optional[Path] = typer.Option(None, help="Write generation statistics to this CSV"),
):
    """Interactively mark individuals and breed new generations."""
    try:
        cfg = load_config(config)
        if seed is not None:
            cfg.seed = seed
        population = Population(
            size if size is not None else cfg.population.size,
            mutation_rate if mutation_rate is not None else cfg.population.mutation_rate,
            rng=make_rng(cfg.seed),
            truncate=cfg.population.truncate_overshoot,
        )
    except ArtmakerError as exc:
        raise typer.BadParameter(str(exc)) from exc

    limit = min(len(population.individuals), cfg.gallery.rows * cfg.gallery.columns)
    records = [generation_record(population)]
    for _ in range(generations):
        console.print(_gallery_table(population, limit))
        while True:
            answer = typer.prompt("Mark individuals (repeat an index to weight it)", default="", show_default=False)
            try:
                picks = _parse_selection(answer, limit)
            except typer.BadParameter as exc:
                console.print(f"[red]{exc}[/red]")
                continue
            for idx in picks:
                population.mark_fitness(population.individuals[idx])
            try:
                population.generation()
            except InvalidState as exc:
                console.print(f"[red]{exc}[/red]")
                continue
            break
        records.append(generation_record(population))
        limit = min(len(population.individuals), cfg.gallery.rows * cfg.gallery.columns)

    console.print(_gallery_table(population, limit))
    metrics_path = metrics or cfg.outputs.metrics_path
    if metrics_path is not None:
        save_metrics(records, Path(metrics_path))
        console.print(f"metrics -> {metrics_path}")


if __name__ == "__main__":
    app()
