"""
Resume Tailoring CLI

Builds tailored resumes from a structured resume file and scores resume items
against job descriptions.

Commands:
    generate - Generate a resume PDF, optionally filtered by ids or tags
    match    - Score resume items against a job description
    list     - List all selectable items with their ids and tags
    serve    - Start the HTTP API for the front-end

Examples:\n

    tailor generate -o resume.pdf                          # Everything

    tailor generate --tags python,aws                      # Items tagged python or aws

    tailor generate --ids acme-kafka,acme-latency          # Specific items

    tailor match -f job.txt                                # Score against a posting

    tailor -r ~/resume.yaml serve --port 8080              # Serve the API
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from tailor import __version__
from tailor.contexts.content import (
    ItemWithID,
    Resume,
    apply_section_order,
    load_order,
    load_resume,
    order_path_for,
    select_by_ids,
    select_by_tags,
)
from tailor.contexts.rendering import compile_latex
from tailor.contexts.targeting import score_items
from tailor.contexts.templating import generate_latex
from tailor.exceptions import (
    CompilationError,
    ResumeLoadError,
    SelectionError,
    TailorError,
)
from tailor.utils.logger import setup_logger
from tailor.utils.text_processing import split_csv, truncate_display

load_dotenv()
DEFAULT_RESUME_PATH = Path(os.getenv("RESUME_PATH", "resume.yaml"))
LOGS_PATH = os.getenv("LOGS_PATH")
ORDER_PATH = os.getenv("ORDER_PATH")
DEFAULT_HOST = os.getenv("TAILOR_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("TAILOR_PORT", "8080"))

SECTION_DISPLAY_ORDER = ["Experience", "Projects", "Leadership"]

app = typer.Typer(
    help="Build tailored LaTeX resumes and match resume items to job descriptions",
    add_completion=False,
    invoke_without_command=True,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"tailor {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    resume: Annotated[
        Path,
        typer.Option("--resume", "-r", help="Path to resume YAML file"),
    ] = DEFAULT_RESUME_PATH,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
):
    """Show help by default when no command is provided."""
    setup_logger(
        context_name="cli",
        log_dir=Path(LOGS_PATH) if LOGS_PATH else None,
        level="DEBUG" if verbose else "WARNING",
        extra_provenance={"Resume": resume},
    )
    ctx.obj = {"resume_path": resume}

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(error: Exception) -> None:
    """Print an error and exit with status 1."""
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _load(ctx: typer.Context, announce: bool = True) -> Resume:
    resume_path: Path = ctx.obj["resume_path"]
    if not resume_path.exists():
        raise ResumeLoadError("resume file not found", resume_path)
    if announce:
        typer.secho(f"Loading resume from: {resume_path}", fg=typer.colors.CYAN)
    return load_resume(resume_path)


def _score_color(score: float) -> str:
    if score >= 90:
        return typer.colors.GREEN
    if score >= 70:
        return typer.colors.YELLOW
    if score >= 50:
        return typer.colors.CYAN
    return typer.colors.RED


def _echo_item(item: ItemWithID, indent: str = "  ") -> None:
    typer.echo(f"{indent}{truncate_display(item.text, 100)}")
    if item.tags:
        typer.echo(f"{indent}" + typer.style("Tags:", fg=typer.colors.MAGENTA) + f" {', '.join(item.tags)}")


@app.command("generate")
def generate_command(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output PDF file path"),
    ] = Path("resume.pdf"),
    ids: Annotated[
        Optional[List[str]],
        typer.Option("--ids", help="Comma-separated item ids to include"),
    ] = None,
    tags: Annotated[
        Optional[List[str]],
        typer.Option("--tags", help="Comma-separated tags to filter items"),
    ] = None,
):
    """
    Generate a LaTeX resume and compile it to PDF.

    Ids take precedence over tags. Without either, every item is included.

    Examples:\n

        $ tailor generate --tags python,backend -o backend.pdf
    """
    try:
        resume = _load(ctx)

        item_ids = split_csv(ids or [])
        item_tags = split_csv(tags or [])
        if item_ids:
            selection = select_by_ids(item_ids)
            typer.secho(f"Filtering by IDs: {', '.join(item_ids)}", fg=typer.colors.YELLOW)
            if not selection.matched_ids(resume):
                raise SelectionError("no items found matching the specified IDs")
        elif item_tags:
            selection = select_by_tags(resume, item_tags)
            typer.secho(f"Filtering by tags: {', '.join(item_tags)}", fg=typer.colors.YELLOW)
            if selection.is_empty:
                raise SelectionError("no items found matching the specified tags")
        else:
            selection = select_by_ids([])
            typer.secho("Including all items", fg=typer.colors.YELLOW)

        order_path = order_path_for(ctx.obj["resume_path"], ORDER_PATH)
        resume = apply_section_order(resume, load_order(order_path, resume))

        typer.secho("Generating LaTeX...", fg=typer.colors.CYAN)
        latex = generate_latex(resume, selection)

        tex_file = output.with_suffix(".tex")
        tex_file.parent.mkdir(parents=True, exist_ok=True)
        tex_file.write_text(latex, encoding="utf-8")
        typer.secho(f"Wrote LaTeX to: {tex_file}", fg=typer.colors.GREEN)

        typer.secho("Compiling PDF with xelatex...", fg=typer.colors.CYAN)
        result = compile_latex(tex_file, output_dir=tex_file.parent)
        if not result.success:
            raise CompilationError(f"xelatex failed: {'; '.join(result.errors)}", output=result.output)
    except TailorError as e:
        _fail(e)

    typer.secho(f"✓ Successfully generated: {result.pdf_path}", fg=typer.colors.GREEN, bold=True)


@app.command("match")
def match_command(
    ctx: typer.Context,
    file: Annotated[
        Optional[Path],
        typer.Option("--file", "-f", help="Path to file containing job description"),
    ] = None,
    job: Annotated[
        Optional[str],
        typer.Option("--job", "-j", help="Job description text (inline)"),
    ] = None,
):
    """
    Score resume items against a job description with an LLM.

    Requires OPENROUTER_API_KEY (environment or .env file).

    Examples:\n

        $ tailor match -f job.txt

        $ tailor match -j "Backend engineer, Python, Kafka"
    """
    try:
        if file is not None:
            try:
                job_description = file.read_text(encoding="utf-8")
            except OSError as e:
                raise TailorError(f"failed to read job description file: {e}") from e
            if not job_description.strip():
                raise TailorError("job description file is empty")
        elif job:
            job_description = job
        else:
            raise TailorError("either --file or --job must be specified")

        resume = _load(ctx)

        typer.secho("Analyzing with AI...", fg=typer.colors.YELLOW)
        result = score_items(resume, job_description)
    except TailorError as e:
        _fail(e)

    scored = [
        (item, result.scores[item.id]) for item in resume.get_all_items() if item.id in result.scores
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)

    typer.secho("\n=== Matching Results ===\n", fg=typer.colors.GREEN)
    for item, score in scored:
        typer.echo(
            typer.style(f"[{score:.0f}]", fg=_score_color(score))
            + " "
            + typer.style(item.id, fg=typer.colors.BLUE)
        )
        _echo_item(item)
        typer.echo("")


@app.command("list")
def list_command(ctx: typer.Context):
    """List all resume items with their ids and tags, grouped by section."""
    try:
        resume = _load(ctx, announce=False)
    except TailorError as e:
        _fail(e)

    items = resume.get_all_items()
    for section in SECTION_DISPLAY_ORDER:
        section_items = [item for item in items if item.section == section]
        if not section_items:
            continue

        typer.secho(f"\n=== {section} ===\n", fg=typer.colors.GREEN)

        current_category = ""
        for item in section_items:
            if item.category and item.category != current_category:
                current_category = item.category
                typer.secho(current_category, fg=typer.colors.YELLOW)

            typer.secho(f"  {item.id}", fg=typer.colors.BLUE)
            _echo_item(item, indent="    ")
            typer.echo("")


@app.command("serve")
def serve_command(
    ctx: typer.Context,
    port: Annotated[
        int,
        typer.Option("--port", "-p", help="Port to run the server on"),
    ] = DEFAULT_PORT,
    host: Annotated[
        str,
        typer.Option("--host", help="Interface to bind"),
    ] = DEFAULT_HOST,
):
    """Start the HTTP server for the resume API."""
    # Imported lazily so the other commands do not pay for FastAPI/uvicorn startup
    from tailor.api import run_server

    resume_path: Path = ctx.obj["resume_path"]
    if not resume_path.exists():
        _fail(ResumeLoadError("resume file not found", resume_path))

    typer.secho(f"Starting server with resume: {resume_path}", fg=typer.colors.CYAN)
    typer.secho(f"Server will be available at: http://{host}:{port}", fg=typer.colors.GREEN)
    setup_logger(context_name="api", log_dir=Path(LOGS_PATH) if LOGS_PATH else None, level="INFO")
    run_server(
        resume_path,
        host=host,
        port=port,
        order_path=Path(ORDER_PATH) if ORDER_PATH else None,
    )


if __name__ == "__main__":
    app()
