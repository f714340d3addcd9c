"""CLI entry point for asset-streams."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from asset_streams.config import (
    AssetStreamsConfig,
    CssOptions,
    HtmlOptions,
    JsOptions,
    OptimizeOptions,
    load_config,
)
from asset_streams.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from asset_streams.files import iter_files, write_files
from asset_streams.transform import TransformPipeline, get_optimize_stages

app = typer.Typer(
    name="asset-streams",
    help="Compile and minify HTML, CSS and JavaScript build output.",
)

config_app = typer.Typer(help="Manage asset-streams configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: AssetStreamsConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _get_config() -> AssetStreamsConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to asset-streams.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    logging.basicConfig(
        level=_LOG_LEVELS[_config.log_level],
        format="%(levelname)s %(name)s: %(message)s",
    )


def _with_flags(
    options: OptimizeOptions,
    html_minify: bool,
    css_minify: bool,
    js_compile: bool,
    js_minify: bool,
) -> OptimizeOptions:
    """Turn on stages requested on the command line; config-level exclusions are kept."""
    html = options.html or HtmlOptions()
    css = options.css or CssOptions()
    js = options.js or JsOptions()
    if html_minify and not html.minify:
        html = html.model_copy(update={"minify": True})
    if css_minify and not css.minify:
        css = css.model_copy(update={"minify": True})
    if js_compile and not js.compile:
        js = js.model_copy(update={"compile": True})
    if js_minify and not js.minify:
        js = js.model_copy(update={"minify": True})
    return options.model_copy(update={"html": html, "css": css, "js": js})


@app.command()
def optimize(
    source: str = typer.Argument(..., help="Directory of built assets"),
    dest: str = typer.Argument(..., help="Output directory"),
    html_minify: bool = typer.Option(False, "--html-minify", help="Minify .html files"),
    css_minify: bool = typer.Option(False, "--css-minify", help="Minify .css and inline <style>"),
    js_compile: bool = typer.Option(False, "--js-compile", help="Compile .js to ES5"),
    js_minify: bool = typer.Option(False, "--js-minify", help="Minify .js files"),
) -> None:
    """Run the optimize pipeline over SOURCE and write the result to DEST."""
    cfg = _get_config()
    source_path = Path(source)
    if not source_path.is_dir():
        rprint(f"[red]Error:[/red] '{source}' is not a directory")
        raise typer.Exit(1)

    options = _with_flags(cfg.optimize, html_minify, css_minify, js_compile, js_minify)
    stages = get_optimize_stages(options)
    rprint(f"[bold]Optimizing[/bold] {source} -> {dest} ({len(stages)} stage(s))...")

    pipeline = TransformPipeline(stages)
    written = write_files(pipeline.run(iter_files(source_path)), dest)

    rprint(
        Panel(
            f"[dim]Source:[/dim]  {source}\n"
            f"[dim]Output:[/dim]  {dest}\n"
            f"[dim]Stages:[/dim]  {', '.join(s.transform.name for s in stages) or 'none'}\n"
            f"[dim]Files:[/dim]   {written}",
            title="Optimize Result",
            border_style="green",
        )
    )


@app.command()
def stages() -> None:
    """List the optimize stages the current config builds, in run order."""
    cfg = _get_config()
    built = get_optimize_stages(cfg.optimize)
    if not built:
        rprint("[yellow]No optimize stages enabled.[/yellow]")
        return

    table = Table(title=f"Optimize Stages ({len(built)})")
    table.add_column("#", justify="right")
    table.add_column("Optimizer", style="cyan")
    table.add_column("Excludes", style="dim")
    for i, stage in enumerate(built, 1):
        table.add_row(str(i), stage.transform.name, ", ".join(stage.exclude) or "-")
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default asset-streams.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint("[yellow]asset-streams.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
