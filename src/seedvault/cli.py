"""CLI entry point for SeedVault."""

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .config import load_config, DEFAULT_CONFIG

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """SeedVault - group captured ideas into themes and spot duplicates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def _get_config(ctx) -> dict:
    return load_config(ctx.obj.get("config_path"))


def _get_store(config: dict):
    from .storage import get_record_store

    try:
        return get_record_store(config)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        sys.exit(1)


@cli.command()
@click.option("--path", default=None, help="Custom SeedVault home")
def init(path):
    """Initialize a vault directory and configuration."""
    import yaml

    if path:
        base_path = Path(path).expanduser().resolve()
    else:
        base_path = Path("~/.seedvault").expanduser()

    console.print(f"[bold green]Initializing SeedVault at {base_path}[/]")
    (base_path / "vault").mkdir(parents=True, exist_ok=True)

    config_file = base_path / "config.yaml"
    if not config_file.exists():
        cfg = dict(DEFAULT_CONFIG)
        cfg["vault_path"] = str(base_path / "vault")
        header = (
            "# Notes with a seed-status in their frontmatter are clustered.\n"
            "# Statuses listed in exclude_statuses are left out.\n\n"
        )
        config_file.write_text(header + yaml.dump(cfg, default_flow_style=False, sort_keys=False))
        console.print(f"  Created config: {config_file}")

    console.print("[bold green]✓ SeedVault initialized![/]")
    console.print(f"  Add idea notes to: {base_path / 'vault'}")
    console.print("  Run: seedvault cluster")


@cli.command()
@click.option("--collection", default=None, help="Only cluster ideas in this vault folder")
@click.option("--threshold", type=float, default=None, help="Similarity threshold to join a cluster")
@click.option("--min-size", type=int, default=None, help="Minimum ideas per cluster")
@click.option("--annotate", is_flag=True, help="Write cluster references back to the notes")
@click.pass_context
def cluster(ctx, collection, threshold, min_size, annotate):
    """Group ideas into keyword clusters."""
    from .clustering.runner import annotate_clusters, cluster_all_ideas, cluster_collection
    from .storage import StoreUnavailableError

    config = _get_config(ctx)
    if threshold is not None:
        config["clustering"]["similarity_threshold"] = threshold
    if min_size is not None:
        config["clustering"]["min_cluster_size"] = min_size
    store = _get_store(config)

    console.print("[blue]Running clustering...[/]")
    try:
        if collection is not None:
            clusters = asyncio.run(cluster_collection(store, collection, config))
        else:
            clusters = asyncio.run(cluster_all_ideas(store, config))
    except StoreUnavailableError as e:
        console.print(f"[red]{e}[/]")
        sys.exit(1)

    if not clusters:
        console.print("[yellow]Not enough similar ideas to form a cluster.[/]")
        return

    table = Table(title=f"Idea Clusters ({len(clusters)})")
    table.add_column("#", style="dim", width=3)
    table.add_column("Theme", style="cyan")
    table.add_column("Ideas", justify="right")
    table.add_column("Strength", justify="right", style="green")
    table.add_column("Keywords", max_width=40)

    for i, c in enumerate(clusters, 1):
        table.add_row(str(i), c.theme, str(len(c.ideas)), str(c.strength), ", ".join(c.common_keywords[:3]))

    console.print(table)

    if annotate:
        written = asyncio.run(annotate_clusters(store, clusters))
        console.print(f"[green]✓ Annotated {written} idea(s) with their cluster[/]")


@cli.command()
@click.option("--threshold", type=float, default=None, help="Similarity a pair must exceed")
@click.option("--limit", "-n", type=int, default=None, help="Number of suggestions")
@click.pass_context
def merges(ctx, threshold, limit):
    """Suggest near-duplicate ideas to merge."""
    from .clustering.runner import suggest_merge_opportunities
    from .storage import StoreUnavailableError

    config = _get_config(ctx)
    if threshold is not None:
        config["merging"]["similarity_threshold"] = threshold
    if limit is not None:
        config["merging"]["limit"] = limit
    store = _get_store(config)

    try:
        opportunities = asyncio.run(suggest_merge_opportunities(store, config))
    except StoreUnavailableError as e:
        console.print(f"[red]{e}[/]")
        sys.exit(1)

    if not opportunities:
        console.print("[yellow]No merge opportunities found.[/]")
        return

    table = Table(title="Merge Opportunities")
    table.add_column("Idea", style="cyan")
    table.add_column("Idea", style="cyan")
    table.add_column("Reason", max_width=50)
    table.add_column("Similarity", justify="right", style="green")

    for opp in opportunities:
        table.add_row(opp.record_a, opp.record_b, opp.reason, f"{opp.similarity}%")

    console.print(table)


if __name__ == "__main__":
    cli()
