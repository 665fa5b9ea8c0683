"""
Rich console rendering for documents and analysis results.
"""
from typing import List, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .data_models import (
    Document,
    DocumentAnalysis,
    DocumentChunk,
    DocumentComparison,
    InsightAnalysis,
    KeywordExtraction,
    QuestionAnswer,
    StoreStats,
    SummaryResult,
)

console = Console()

PREVIEW_CHARS = 200


def format_file_size(size: int) -> str:
    """1536 -> '1.5 KB'"""
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    for unit in units:
        if value < 1024 or unit == units[-1]:
            if unit == "Bytes":
                return f"{int(value)} Bytes"
            return f"{round(value, 2):g} {unit}"
        value /= 1024
    return f"{size} Bytes"


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def _bullets(items: Sequence[str]) -> str:
    return "\n".join(f"• {item}" for item in items) if items else "[dim]none[/dim]"


def show_document_info(document: Document) -> None:
    meta = document.metadata
    table = Table(show_header=False, box=None)
    table.add_row("ID", document.id)
    table.add_row("Type", meta.file_type)
    table.add_row("Size", format_file_size(meta.size))
    table.add_row("Chunks", str(meta.chunk_count or 0))
    table.add_row("Created", meta.created_at.isoformat(timespec="seconds"))
    for key, value in meta.extra.items():
        if value and not isinstance(value, dict):
            table.add_row(key.replace("_", " ").title(), str(value))
    console.print(Panel(table, title=f"📄 {document.filename}", border_style="cyan"))
    console.print(f"[dim]{_preview(document.content)}[/dim]")


def show_documents(documents: List[Document]) -> None:
    if not documents:
        console.print("[yellow]📁 No documents loaded[/yellow]")
        return

    table = Table(title="📚 Loaded Documents")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Filename", style="cyan")
    table.add_column("ID")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("Chunks", justify="right")
    for i, doc in enumerate(documents, 1):
        table.add_row(
            str(i),
            doc.filename,
            doc.id,
            doc.metadata.file_type,
            format_file_size(doc.metadata.size),
            str(doc.metadata.chunk_count or 0),
        )
    console.print(table)


def show_summary(summary: SummaryResult) -> None:
    body = summary.summary or "[dim]No summary available[/dim]"
    if summary.key_points:
        body += "\n\n[bold]Key points[/bold]\n" + _bullets(summary.key_points)
    body += f"\n\n[dim]{summary.word_count} words · confidence {summary.confidence}/10[/dim]"
    console.print(Panel(body, title="📋 Summary", border_style="green"))


def show_keywords(keywords: KeywordExtraction) -> None:
    table = Table(title="🏷️  Keywords")
    table.add_column("Category", style="bold")
    table.add_column("Values")
    table.add_row("Keywords", ", ".join(keywords.keywords))
    table.add_row("Entities", ", ".join(keywords.entities))
    table.add_row("Topics", ", ".join(keywords.topics))
    table.add_row("Concepts", ", ".join(keywords.concepts))
    console.print(table)


def show_insights(insights: InsightAnalysis) -> None:
    sentiment_style = {"positive": "green", "negative": "red"}.get(insights.sentiment, "yellow")
    body = (
        f"Sentiment: [{sentiment_style}]{insights.sentiment}[/{sentiment_style}]\n"
        f"Complexity: {insights.complexity}\n"
        f"Readability: {insights.readability_score:g}/100\n"
    )
    if insights.topics:
        body += f"Topics: {', '.join(insights.topics)}\n"
    body += "\n[bold]Key insights[/bold]\n" + _bullets(insights.key_insights)
    if insights.recommendations:
        body += "\n\n[bold]Recommendations[/bold]\n" + _bullets(insights.recommendations)
    console.print(Panel(body, title="💡 Insights", border_style="magenta"))


def show_questions(questions: List[str]) -> None:
    if not questions:
        console.print("[yellow]No questions generated[/yellow]")
        return
    body = "\n".join(f"{i}. {q}" for i, q in enumerate(questions, 1))
    console.print(Panel(body, title="❓ Questions", border_style="blue"))


def show_analysis(analysis: DocumentAnalysis) -> None:
    show_summary(analysis.summary)
    show_keywords(analysis.keywords)
    show_insights(analysis.insights)
    show_questions(analysis.questions)


def show_answer(answer: QuestionAnswer) -> None:
    console.print(Panel(
        f"[bold]Q:[/bold] {answer.question}\n\n{answer.answer}\n\n"
        f"[dim]{answer.relevant_sections} relevant of {answer.document_length} sentences[/dim]",
        title="💬 Answer",
        border_style="green",
    ))


def show_chunks(chunks: List[DocumentChunk], preview: int = 80) -> None:
    table = Table(title=f"✂️  {len(chunks)} chunks")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Preview")
    for chunk in chunks:
        table.add_row(
            str(chunk.index),
            str(chunk.start_char),
            str(chunk.end_char),
            _preview(chunk.content.replace("\n", " "), preview),
        )
    console.print(table)


def show_comparison(comparison: DocumentComparison) -> None:
    table = Table(title="📈 Document Comparison")
    table.add_column("Metric", style="bold")
    table.add_column(comparison.first.filename, style="cyan")
    table.add_column(comparison.second.filename, style="cyan")
    table.add_row(
        "Summary words",
        str(comparison.first_summary.word_count),
        str(comparison.second_summary.word_count),
    )
    table.add_row("Sentiment", comparison.first_insights.sentiment, comparison.second_insights.sentiment)
    table.add_row("Complexity", comparison.first_insights.complexity, comparison.second_insights.complexity)
    table.add_row(
        "Readability",
        f"{comparison.first_insights.readability_score:g}/100",
        f"{comparison.second_insights.readability_score:g}/100",
    )
    console.print(table)
    if comparison.common_topics:
        console.print(f"\n🔗 Common Topics: {', '.join(comparison.common_topics)}")


def show_stats(stats: StoreStats) -> None:
    table = Table(title="📊 Statistics", show_header=False)
    table.add_row("Documents", str(stats.total_documents))
    table.add_row("Chunks", str(stats.total_chunks))
    table.add_row("Total size", format_file_size(stats.total_size))
    table.add_row("Avg chunks / document", str(stats.average_chunks_per_document))
    console.print(table)
