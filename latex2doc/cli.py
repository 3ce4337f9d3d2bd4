"""CLI entry point for latex2doc."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from latex2doc.config import Latex2DocConfig, configure_logging, load_config
from latex2doc.config.loader import DEFAULT_CONFIG_TEMPLATE
from latex2doc.converter.gateway import ConversionGateway
from latex2doc.converter.models import ConversionOptions, SourceDocument
from latex2doc.converter.prompts import build_conversion_prompt
from latex2doc.export import WordExporter
from latex2doc.llm import create_llm_provider
from latex2doc.llm.base import LLMProvider
from latex2doc.workflow import AppError, ConversionWorkflow, UploadError, WorkflowState
from latex2doc.workflow.uploads import load_source_file

app = typer.Typer(
    name="latex2doc",
    help="Convert LaTeX documents to Word-openable .doc files with Gemini.",
)

config_app = typer.Typer(help="Manage latex2doc configuration.")
app.add_typer(config_app, name="config")

STDIN_SOURCE = "-"

# Global state
_config: Latex2DocConfig | None = None


def _get_config() -> Latex2DocConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to latex2doc.yaml")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging("debug" if verbose else _config.log_level, _config.log_format)


def _resolve_options(
    base: ConversionOptions,
    strict: bool | None,
    math_priority: bool | None,
    image_placeholders: bool | None,
) -> ConversionOptions:
    """Apply command-line overrides on top of the configured defaults."""
    options = base
    if strict is not None:
        options = options.with_option("strict_formatting", strict)
    if math_priority is not None:
        options = options.with_option("math_priority", math_priority)
    if image_placeholders is not None:
        options = options.with_option("no_image_placeholders", not image_placeholders)
    return options


def _show_error(error: AppError) -> None:
    rprint(Panel(error.message, title=error.title, border_style="red"))


async def _run_conversion(
    source: str,
    cfg: Latex2DocConfig,
    llm: LLMProvider,
    options: ConversionOptions,
) -> WorkflowState:
    gateway = ConversionGateway(llm, timeout=cfg.llm.timeout)
    workflow = ConversionWorkflow(gateway, options=options, upload_config=cfg.upload)

    if source == STDIN_SOURCE:
        workflow.on_source_changed(typer.get_text_stream("stdin").read())
    else:
        state = await workflow.on_file_selected(source)
        if state.error is not None:
            return state

    return await workflow.on_convert_requested()


StrictOption = Annotated[
    bool | None,
    typer.Option("--strict/--no-strict", help="Prioritize exact visual layout"),
]
MathPriorityOption = Annotated[
    bool | None,
    typer.Option(
        "--math-priority/--no-math-priority",
        help="Favor MathML accuracy over minor text formatting",
    ),
]
ImagePlaceholderOption = Annotated[
    bool | None,
    typer.Option(
        "--image-placeholders/--no-image-placeholders",
        help="Render \\includegraphics as placeholder boxes",
    ),
]


@app.command()
def convert(
    source: str = typer.Argument(..., help="Path to a .tex file, or - for stdin"),
    output_dir: Annotated[
        str | None, typer.Option("--output-dir", "-o", help="Override output directory")
    ] = None,
    strict: StrictOption = None,
    math_priority: MathPriorityOption = None,
    image_placeholders: ImagePlaceholderOption = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Print HTML instead of writing"),
) -> None:
    """Convert a LaTeX document to a Word-openable .doc file."""
    cfg = _get_config()
    options = _resolve_options(cfg.options, strict, math_priority, image_placeholders)

    try:
        llm = create_llm_provider(cfg.llm)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    rprint(f"[bold]Converting[/bold] {source} (model: {cfg.llm.model})...")
    state = asyncio.run(_run_conversion(source, cfg, llm, options))

    if state.error is not None:
        _show_error(state.error)
        raise typer.Exit(1)
    if state.result is None:
        rprint("[yellow]Conversion finished without a result.[/yellow]")
        raise typer.Exit(1)

    if dry_run:
        rprint(Syntax(state.result, "html", theme="monokai"))
        return

    export_cfg = cfg.export
    if output_dir:
        export_cfg = export_cfg.model_copy(update={"output_dir": output_dir})
    exporter = WordExporter(export_cfg, cfg.upload.extensions)
    dest = exporter.write(state.result, state.source.file_name)
    rprint(Panel(
        f"[dim]File:[/dim]    {dest}\n"
        f"[dim]Source:[/dim]  {state.source.file_name}\n"
        f"[dim]Size:[/dim]    {dest.stat().st_size} bytes",
        title="Conversion Successful",
        border_style="green",
    ))


@app.command()
def prompt(
    source: str = typer.Argument(..., help="Path to a .tex file, or - for stdin"),
    strict: StrictOption = None,
    math_priority: MathPriorityOption = None,
    image_placeholders: ImagePlaceholderOption = None,
) -> None:
    """Print the prompt that would be sent to the model."""
    cfg = _get_config()
    options = _resolve_options(cfg.options, strict, math_priority, image_placeholders)

    if source == STDIN_SOURCE:
        document = SourceDocument(content=typer.get_text_stream("stdin").read())
    else:
        try:
            document = asyncio.run(load_source_file(source, cfg.upload))
        except UploadError as e:
            _show_error(e.error)
            raise typer.Exit(1)

    typer.echo(build_conversion_prompt(document.content, options))


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default latex2doc.yaml in current directory."""
    target = Path("latex2doc.yaml")
    if target.exists() and not force:
        rprint("[yellow]latex2doc.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
