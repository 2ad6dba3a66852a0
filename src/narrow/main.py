from pathlib import Path
from typing import List, Optional

import typer

# Import logger setup first to ensure logging is configured
from narrow.logger import get_logger, setup_logger
from narrow.core.config import EngineConfig, SessionOptions, load_engine_config
from narrow.core.engine import NarrowEngine
from narrow.core.history import InMemoryHistory
from narrow.domain.errors import InvalidCollectionShape
from narrow.presentation.tui import NarrowApp

cli = typer.Typer(
    name="narrow",
    help="Incrementally narrow a list of candidates and print the chosen one",
    epilog="""
    Examples:
    $ narrow pick --file words.txt --default apple
    $ narrow filter an banana apple kiwi
    """,
    add_completion=False,
)


def _read_candidates(candidates: Optional[List[str]], file: Optional[Path]) -> list[str]:
    items = list(candidates or [])
    if file is not None:
        with open(file, "r", encoding="utf-8") as f:
            items.extend(line.rstrip("\n") for line in f if line.strip())
    return items


def _make_engine(config: EngineConfig, page_size: Optional[int], debug: bool) -> NarrowEngine:
    setup_logger(log_level="DEBUG" if debug else config.log_level)
    if page_size is not None:
        config = config.model_copy(update={"page_size": page_size})
    return NarrowEngine(config=config, history=InMemoryHistory())


@cli.command()
def pick(
    candidates: Optional[List[str]] = typer.Argument(None, help="Candidates to choose from"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read candidates, one per line"),
    prompt: str = typer.Option("Pick:", "--prompt", "-p", help="Prompt text"),
    default: Optional[str] = typer.Option(None, "--default", "-d", help="Default candidate"),
    initial: str = typer.Option("", "--initial", "-i", help="Initial query"),
    require_match: bool = typer.Option(False, "--require-match", help="Only allow existing candidates"),
    multi: bool = typer.Option(False, "--multi", "-m", help="Allow selecting several candidates"),
    move_default: bool = typer.Option(True, "--move-default/--keep-default-in-place", help="Move the default candidate to the top"),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Rows shown at once"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Pick candidates interactively and print the result."""
    engine = _make_engine(load_engine_config(), page_size, debug)
    logger = get_logger("main")

    options = SessionOptions(
        default_candidate=default,
        initial_input=initial,
        require_match=require_match,
        multi_select=multi,
        move_default_to_front=move_default,
    )
    try:
        session = engine.start_session(prompt, _read_candidates(candidates, file), options, last_command="pick")
    except InvalidCollectionShape as e:
        typer.echo(f"❌ {e.message}", err=True)
        raise typer.Exit(code=2)

    result = NarrowApp(session).run()
    if result is None:
        logger.info("Pick cancelled")
        raise typer.Exit(code=1)

    for value in result if isinstance(result, list) else [result]:
        typer.echo(value)


@cli.command("filter")
def filter_(
    query: str = typer.Argument(..., help="Query to narrow with"),
    candidates: Optional[List[str]] = typer.Argument(None, help="Candidates to filter"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read candidates, one per line"),
    default: Optional[str] = typer.Option(None, "--default", "-d", help="Default candidate"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Print only the first N matches"),
    count: bool = typer.Option(False, "--count", help="Print the count indicator first"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Print the candidates matching QUERY in the order a session would show them."""
    config = load_engine_config()
    engine = _make_engine(config, None, debug)
    options = SessionOptions(default_candidate=default, initial_input=query)
    try:
        session = engine.start_session("filter", _read_candidates(candidates, file), options)
    except InvalidCollectionShape as e:
        typer.echo(f"❌ {e.message}", err=True)
        raise typer.Exit(code=2)

    if count:
        typer.echo(session.view.count_summary.render(config.count_format))
    matches = session.state.refined_candidates
    for candidate in matches[:limit] if limit is not None else matches:
        typer.echo(candidate.full_form)


def run():
    """Entry point for the narrow CLI."""
    cli()


if __name__ == "__main__":
    run()
