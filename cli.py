"""
Document Intelligence - Command Line Interface
Process documents and run analyses from the terminal.

Each command works on the files it is given. Run without a command for an
interactive session that keeps processed documents in memory.
"""
import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.panel import Panel
from rich.prompt import Prompt

from docintel import display
from docintel.config import settings
from docintel.display import console
from docintel.document_processing import FixedWindowChunker
from docintel.exceptions import DocIntelError, ProviderConfigError
from docintel.providers import LLMProvider, create_chat_provider
from docintel.system import DocumentIntelligenceSystem

cli = typer.Typer(help="Document Intelligence CLI", invoke_without_command=True)


def get_provider(local: bool = False) -> Optional[LLMProvider]:
    """Provider from settings, or None for local-only analysis."""
    if local or not settings.has_llm_credentials():
        return None
    try:
        return create_chat_provider(settings)
    except ProviderConfigError as e:
        console.print(f"[yellow]⚠️  {e}; falling back to local analysis[/yellow]")
        return None


def get_system(local: bool = False) -> DocumentIntelligenceSystem:
    return DocumentIntelligenceSystem(provider=get_provider(local))


async def _load(system: DocumentIntelligenceSystem, paths: List[Path]):
    return [await system.process_file(p) for p in paths]


def _fail(message: str) -> None:
    console.print(f"[red]❌ {message}[/red]")
    raise typer.Exit(code=1)


def show_banner():
    console.print(Panel.fit(
        "[bold cyan]📚 Document Intelligence System[/bold cyan]\n"
        "[dim]Chunking, local heuristics and LLM-assisted insights[/dim]",
        border_style="cyan",
    ))


@cli.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Document Intelligence - Interactive CLI"""
    if ctx.invoked_subcommand is None:
        interactive_mode()


@cli.command()
def init():
    """Check configuration and test the model connection."""
    show_banner()
    console.print(f"   - Groq: {'✓' if settings.groq_api_key else '✗'}")
    console.print(f"   - OpenAI: {'✓' if settings.openai_api_key else '✗'}")
    if not settings.has_llm_credentials():
        _fail("No API keys configured. Set GROQ_API_KEY or OPENAI_API_KEY")

    system = get_system()
    if system.provider is None:
        raise typer.Exit(code=1)
    if asyncio.run(system.initialize()):
        console.print("[green]✅ Model connection test passed[/green]")
    else:
        console.print("[yellow]⚠️  Model connection test failed[/yellow]")


@cli.command()
def process(
    file: Path = typer.Argument(..., help="Document to process"),
    analyze: bool = typer.Option(False, "--analyze", "-a", help="Analyze after processing"),
    local: bool = typer.Option(False, "--local", help="Skip the language model"),
):
    """Process a single document file."""
    system = get_system(local)

    async def run():
        document = await system.process_file(file)
        display.show_document_info(document)
        if analyze:
            display.show_analysis(await system.analyze_document(document.id))

    try:
        asyncio.run(run())
    except (DocIntelError, OSError) as e:
        _fail(str(e))


@cli.command("process-dir")
def process_dir(directory: Path = typer.Argument(..., help="Directory to scan recursively")):
    """Process all supported files in a directory."""
    system = get_system(local=True)
    try:
        documents = asyncio.run(system.process_directory(directory))
    except OSError as e:
        _fail(str(e))
    display.show_documents(documents)
    if documents:
        display.show_stats(system.stats())


@cli.command()
def analyze(
    file: Path = typer.Argument(..., help="Document to analyze"),
    local: bool = typer.Option(False, "--local", help="Skip the language model"),
):
    """Summary, keywords, insights and questions for a document."""
    system = get_system(local)

    async def run():
        document = (await _load(system, [file]))[0]
        display.show_document_info(document)
        display.show_analysis(await system.analyze_document(document.id))

    try:
        asyncio.run(run())
    except (DocIntelError, OSError) as e:
        _fail(str(e))


@cli.command()
def ask(
    file: Path = typer.Argument(..., help="Document to question"),
    question: str = typer.Argument(..., help="Question about the document"),
):
    """Answer a question from the document's own sentences."""
    system = get_system(local=True)
    try:
        document = asyncio.run(_load(system, [file]))[0]
        display.show_answer(system.ask(document.id, question))
    except (DocIntelError, OSError, ValueError) as e:
        _fail(str(e))


@cli.command()
def questions(
    file: Path = typer.Argument(..., help="Document to generate questions for"),
    local: bool = typer.Option(False, "--local", help="Skip the language model"),
):
    """Suggest study questions for a document."""
    system = get_system(local)

    async def run():
        document = (await _load(system, [file]))[0]
        display.show_questions(await system.suggest_questions(document.id))

    try:
        asyncio.run(run())
    except (DocIntelError, OSError) as e:
        _fail(str(e))


@cli.command()
def similar(
    query: str = typer.Argument(..., help="Keywords to match"),
    files: List[Path] = typer.Argument(..., help="Documents to search"),
):
    """Top chunks by keyword occurrences."""
    system = get_system(local=True)
    try:
        asyncio.run(_load(system, files))
    except (DocIntelError, OSError) as e:
        _fail(str(e))
    chunks = system.find_similar(query)
    if not chunks:
        console.print("[yellow]No matching chunks[/yellow]")
        return
    display.show_chunks(chunks)


@cli.command()
def search(
    query: str = typer.Argument(..., help="Text to look for"),
    files: List[Path] = typer.Argument(..., help="Documents to search"),
):
    """Documents whose content or filename contains the query."""
    system = get_system(local=True)
    try:
        asyncio.run(_load(system, files))
    except (DocIntelError, OSError) as e:
        _fail(str(e))
    results = system.search_documents(query)
    if not results:
        console.print("No documents found matching the query")
        return
    display.show_documents(results)


@cli.command()
def compare(
    first: Path = typer.Argument(..., help="First document"),
    second: Path = typer.Argument(..., help="Second document"),
    local: bool = typer.Option(False, "--local", help="Skip the language model"),
):
    """Compare two documents."""
    system = get_system(local)

    async def run():
        doc1, doc2 = await _load(system, [first, second])
        display.show_comparison(await system.compare_documents(doc1.id, doc2.id))

    try:
        asyncio.run(run())
    except (DocIntelError, OSError) as e:
        _fail(str(e))


@cli.command()
def chunk(
    file: Path = typer.Argument(..., help="Document to chunk"),
    size: int = typer.Option(settings.chunk_size, "--size", "-s", help="Window size in characters"),
    overlap: int = typer.Option(settings.chunk_overlap, "--overlap", "-o", help="Overlap in characters"),
):
    """Show the chunk windows for a document."""
    try:
        chunker = FixedWindowChunker(size, overlap)
    except ValueError as e:
        _fail(str(e))
    system = get_system(local=True)
    try:
        document = asyncio.run(_load(system, [file]))[0]
    except (DocIntelError, OSError) as e:
        _fail(str(e))
    display.show_chunks(chunker.chunk_document(document))


# ----------------------------------------------------------------------
# Interactive mode
# ----------------------------------------------------------------------

MENU = """
[bold]Available Commands:[/bold]

  [cyan]1. process[/cyan]   - Process a file or directory
  [cyan]2. list[/cyan]      - List processed documents
  [cyan]3. analyze[/cyan]   - Analyze a document
  [cyan]4. ask[/cyan]       - Ask a question about a document
  [cyan]5. similar[/cyan]   - Find chunks matching keywords
  [cyan]6. search[/cyan]    - Search documents
  [cyan]7. compare[/cyan]   - Compare two documents
  [cyan]8. stats[/cyan]     - Show statistics
  [cyan]9. clear[/cyan]     - Clear all documents
  [cyan]0. exit[/cyan]      - Exit
"""


def interactive_mode():
    """Run interactive menu mode with an in-memory document store."""
    show_banner()
    system = get_system()
    asyncio.run(system.initialize())

    while True:
        console.print(Panel(MENU, title="Main Menu", border_style="blue"))
        choice = Prompt.ask("\n[bold]Enter command[/bold]", default="list")

        try:
            if choice in ["0", "exit", "quit", "q"]:
                console.print("\n[yellow]Goodbye![/yellow]\n")
                break
            elif choice in ["1", "process"]:
                path = Path(Prompt.ask("Path"))
                if path.is_dir():
                    asyncio.run(system.process_directory(path))
                else:
                    display.show_document_info(asyncio.run(system.process_file(path)))
            elif choice in ["2", "list"]:
                display.show_documents(system.list_documents())
            elif choice in ["3", "analyze"]:
                document_id = Prompt.ask("Document ID")
                display.show_analysis(asyncio.run(system.analyze_document(document_id)))
            elif choice in ["4", "ask"]:
                document_id = Prompt.ask("Document ID")
                display.show_answer(system.ask(document_id, Prompt.ask("Question")))
            elif choice in ["5", "similar"]:
                display.show_chunks(system.find_similar(Prompt.ask("Keywords")))
            elif choice in ["6", "search"]:
                display.show_documents(system.search_documents(Prompt.ask("Query")))
            elif choice in ["7", "compare"]:
                first, second = Prompt.ask("First ID"), Prompt.ask("Second ID")
                display.show_comparison(asyncio.run(system.compare_documents(first, second)))
            elif choice in ["8", "stats"]:
                display.show_stats(system.stats())
            elif choice in ["9", "clear"]:
                system.clear()
                console.print("[green]✅ Document store cleared[/green]")
            else:
                console.print(f"[red]Unknown command: {choice}[/red]")
        except (DocIntelError, OSError, ValueError) as e:
            console.print(f"[red]❌ {e}[/red]")


if __name__ == "__main__":
    cli()
