"""CLI entry point for Palabra."""

from __future__ import annotations

import asyncio
import json
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from palabra import __version__
from palabra.config import Settings, configure_logging
from palabra.engine.alignment import AlignmentEngine
from palabra.engine.resolver import WordResolver
from palabra.lexicon.normalize import clean_word, tokenize
from palabra.pipeline.orchestrator import TranslationService, TranslationSource
from palabra.sources.books import BOOKS, parse_reference

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: PALABRA_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Palabra - Spanish Bible reading aid with English word alignment."""
    settings = Settings.from_env()
    if log_level:
        settings.log_level = log_level
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.command("word")
@click.argument("word")
@click.option("--context", "-c", default=None, help="English verse text for sense selection")
@click.option("--offline", is_flag=True, help="Dictionary only, no network fallback")
@click.pass_obj
def translate_word(settings: Settings, word: str, context: str | None, offline: bool):
    """Translate a single Spanish word.

    Example: palabra word creó --context "God created the heaven"
    """
    if offline:
        translation = WordResolver(settings=settings).resolve_offline(word, context)
    else:

        async def _run() -> str:
            async with TranslationService(settings) as service:
                return await service.translate_word(word, context)

        translation = asyncio.run(_run())

    if clean_word(translation).lower() == clean_word(word).lower():
        console.print(f"[yellow]{word}[/yellow] [dim](no distinct translation)[/dim]")
    else:
        console.print(f"[bold]{word}[/bold] → [green]{translation}[/green]")


@cli.command()
@click.argument("spanish")
@click.argument("english")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def align(settings: Settings, spanish: str, english: str, output_json: bool):
    """Align the words of a Spanish sentence with its English counterpart.

    Example: palabra align "En el principio creó Dios" "In the beginning God created"
    """
    engine = AlignmentEngine(tie_epsilon=settings.alignment_tie_epsilon)
    links = engine.explain(spanish, english)

    if output_json:
        result = {
            "spanish_words": tokenize(spanish),
            "english_words": tokenize(english),
            "links": [link.to_dict() for link in links],
        }
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))
        return

    if not links:
        console.print("[yellow]No alignments found[/yellow]")
        return

    table = Table(title="Alignment")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Spanish", style="cyan")
    table.add_column("English", style="green")
    table.add_column("Positions", style="dim")
    table.add_column("Sense", style="magenta")

    for link in links:
        table.add_row(
            str(link.spanish_index),
            link.spanish_word,
            " ".join(link.english_words),
            ", ".join(str(j) for j in link.english_indices),
            ", ".join(link.matched_candidates),
        )

    console.print(table)
    unaligned = len(tokenize(spanish)) - len(links)
    if unaligned:
        console.print(f"[dim]{unaligned} word(s) without a confident match[/dim]")


@cli.command()
@click.argument("reference")
@click.option("--text", "-t", required=True, help="Spanish verse text")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def verse(settings: Settings, reference: str, text: str, output_json: bool):
    """Translate a Spanish verse and align it with the English text.

    Example: palabra verse "Génesis 1:1" --text "En el principio creó Dios..."
    """
    try:
        ref = parse_reference(reference)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    async def _run():
        async with TranslationService(settings) as service:
            translation = await service.translate_verse(
                ref.book, ref.chapter, ref.verse, text
            )
            links = []
            if translation.source is TranslationSource.BIBLE_API:
                links = service.explain_alignment(text, translation.translated_text)
            return translation, links

    translation, links = asyncio.run(_run())

    if output_json:
        result = translation.to_dict()
        result["reference"] = str(ref)
        result["links"] = [link.to_dict() for link in links]
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))
        return

    console.print(Panel(f"[bold]{ref}[/bold]\n{text}", title="Spanish"))
    source_color = (
        "green" if translation.source is TranslationSource.BIBLE_API else "yellow"
    )
    console.print(
        Panel(
            translation.translated_text,
            title=f"English [{source_color}]({translation.source.value})[/{source_color}]",
        )
    )
    for link in links:
        console.print(
            f"  {link.spanish_word} → {' '.join(link.english_words)}"
        )


@cli.command()
def books():
    """List the books of the Reina-Valera Bible."""
    table = Table(title="Books")
    table.add_column("Spanish", style="cyan")
    table.add_column("English", style="green")
    table.add_column("Chapters", justify="right")
    for book in BOOKS:
        table.add_row(book.spanish, book.english, str(book.chapters))
    console.print(table)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=8000, help="Port to listen on")
def serve(host: str, port: int):
    """Start the API server."""
    import uvicorn

    console.print(f"[bold blue]Starting Palabra API at http://{host}:{port}[/bold blue]")
    uvicorn.run("palabra.api.main:app", host=host, port=port)


if __name__ == "__main__":
    cli()
