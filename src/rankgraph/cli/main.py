#!/usr/bin/env python3
"""
rankgraph CLI - score items, export the ranking graph, prepare edits
"""

import asyncio
import logging

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rankgraph.catalog import load_catalog
from rankgraph.edits import EditPreparer, HttpEditPreparationService, prepare_session_edits
from rankgraph.errors import NothingRankedError, RankGraphError
from rankgraph.export import write_prepared_edit, write_property_graph
from rankgraph.ranking import RankingSession
from rankgraph.settings import settings

console = Console()


def _configure_logging() -> None:
    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _parse_score(raw: str) -> tuple[str, float]:
    item_id, sep, value = raw.rpartition("=")
    if not sep or not item_id:
        raise click.BadParameter(f"expected ID=VALUE, got {raw!r}", param_hint="--score")
    try:
        return item_id, float(value)
    except ValueError:
        raise click.BadParameter(f"score for {item_id} is not a number: {value!r}", param_hint="--score")


def render_ranking(session: RankingSession) -> None:
    table = Table(title=f"{session.rank_list.name}")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Item", style="white")
    table.add_column("Score", style="green", justify="right")

    for pos, item in enumerate(session.ranked_items(), start=1):
        table.add_row(str(pos), f"{item.glyph} {item.name}".strip(), f"{session.score_of(item.id):g}")

    if session.ranked_count == 0:
        console.print("[yellow]No items ranked yet[/yellow]")
    else:
        console.print(table)

    unranked = ", ".join(item.name for item in session.unranked_items()) or "All items ranked!"
    stats = session.stats()
    console.print(
        Panel(
            f"Total items: {stats.total_items}\n"
            f"Items ranked: {stats.ranked} / {stats.total_items}\n"
            f"Entities: {stats.entities}\n"
            f"Relations: {stats.relations}\n"
            f"Unranked: {unranked}",
            title="Graph",
        )
    )


async def _prepare(session: RankingSession) -> EditPreparer:
    service = HttpEditPreparationService()
    preparer = EditPreparer(service)
    try:
        await prepare_session_edits(session, preparer)
    finally:
        await service.aclose()
    return preparer


@click.group()
def cli():
    """rankgraph - slider rankings as knowledge graphs"""
    _configure_logging()


@cli.command()
def version():
    """Print the installed version"""
    from rankgraph import __version__

    click.echo(__version__)


@cli.command()
@click.argument("catalog", type=click.Path(exists=True, dir_okay=False))
@click.option("--rank", "rank_ids", multiple=True, help="Item id to rank (repeatable, in order)")
@click.option("--score", "scores", multiple=True, help="ID=VALUE score to apply (repeatable)")
@click.option("--out-dir", default=None, type=click.Path(file_okay=False), help="Write graph JSON here")
@click.option("--prepare", is_flag=True, help="Prepare edits with the configured service")
def rank(catalog, rank_ids, scores, out_dir, prepare):
    """Rank items from CATALOG and show the resulting order"""
    try:
        rank_list, items = load_catalog(catalog)
        session = RankingSession(rank_list, items)

        for item_id in rank_ids:
            session.insert_rank(item_id)
        for raw in scores:
            item_id, value = _parse_score(raw)
            session.insert_rank(item_id)
            # same gesture as a slider drag: order settles on release
            session.begin_adjustment(item_id)
            session.set_score(item_id, value)
            session.end_adjustment()
    except RankGraphError as e:
        raise click.ClickException(str(e))

    render_ranking(session)

    if out_dir:
        path = write_property_graph(session.property_graph(), out_dir)
        console.print(f"[green]Graph written to[/green] {path}")

    if not prepare:
        return

    try:
        preparer = asyncio.run(_prepare(session))
    except NothingRankedError as e:
        console.print(f"[yellow]{e}[/yellow]")
        raise SystemExit(1)

    if preparer.prepared is None:
        console.print(f"[red]Failed to prepare edits:[/red] {preparer.status.message or 'An error occurred'}")
        raise SystemExit(1)

    summary = preparer.prepared.summary
    console.print(
        Panel(
            f"Edit name: {preparer.prepared.name}\n"
            f"Total operations: {summary.total_ops}\n"
            f"Entity operations: {summary.entity_ops}\n"
            f"Property operations: {summary.property_ops}\n"
            f"Relation operations: {summary.relation_ops}",
            title="Edits ready",
        )
    )
    path = write_prepared_edit(preparer.prepared, out_dir)
    console.print(f"[green]Edits written to[/green] {path}")


@cli.command()
@click.option("--catalog", default=None, type=click.Path(exists=True, dir_okay=False))
def serve(catalog):
    """Serve a ranking session over HTTP"""
    from rankgraph.service.server import main

    main(catalog)


if __name__ == "__main__":
    cli()
