"""Rich-based display module for plagiarism detection results."""

from typing import List
from rich.console import Console, RenderableType
from rich.text import Text
from rich.style import Style
from rich.table import Table

from ..core.types import HighlightedResult, TextSegment


def create_console() -> Console:
    """Create a rich Console instance."""
    return Console()


def comparison(renderable1: RenderableType, renderable2: RenderableType) -> Table:
    """
    Create a side-by-side comparison table with two columns.

    Args:
        renderable1: Content for the first column
        renderable2: Content for the second column

    Returns:
        A Table with two equal-width columns
    """
    table = Table(show_header=False, pad_edge=False, box=None, expand=True)
    table.add_column("1", ratio=1)
    table.add_column("2", ratio=1)
    table.add_row(renderable1, renderable2)
    return table


def highlight_segments(segments: List[TextSegment]) -> Text:
    """
    Build rich Text from highlighted segments.

    Args:
        segments: Alternating bold and plain runs

    Returns:
        Rich Text object with highlights
    """
    rich_text = Text()
    for i, segment in enumerate(segments):
        if i > 0:
            rich_text.append(" ")
        rich_text.append(segment.text, style="bold yellow" if segment.bold else None)
    return rich_text


def get_coverage_style(percent: int) -> Style:
    """
    Get color style based on coverage percentage.

    Args:
        percent: Coverage (0-100)

    Returns:
        Rich Style object
    """
    if percent >= 50:
        return Style(color="red", bold=True)
    elif percent >= 20:
        return Style(color="yellow", bold=True)
    else:
        return Style(color="cyan", bold=True)


def _column(label: str, owner: str, percent: int, segments: List[TextSegment]) -> Text:
    content = Text()
    content.append(f"{label} {owner} ", style="dim")
    content.append(f"{percent}%", style=get_coverage_style(percent))
    content.append("\n")
    content.append_text(highlight_segments(segments))
    return content


def display_result(console: Console, result: HighlightedResult, index: int):
    """
    Display a single result with rich formatting.

    Args:
        console: Rich Console instance
        result: HighlightedResult to display
        index: Result index number
    """
    kind = "identical" if result.equal_fragments else "similar"
    header = Text()
    header.append(f"Result #{index}", style="bold cyan")
    header.append(f" - {result.match_count} {kind} fragments")
    console.print(header)

    label1 = "Trusted" if result.trusted_owner1 else "Untrusted"
    console.print(comparison(
        _column(label1, result.owner_id1, result.text1_plag_percent, result.text_display1),
        _column("Untrusted", result.owner_id2, result.text2_plag_percent, result.text_display2)
    ))
    console.print()


def display_results(results: List[HighlightedResult], max_results: int = 10):
    """
    Display highlighted results, most significant first.

    Args:
        results: Projected results, already sorted
        max_results: Maximum number of results to display
    """
    console = create_console()

    if not results:
        console.print("No plagiarism detected.", style="bold green")
        return

    console.print(f"Top {min(len(results), max_results)} results:", style="bold")
    console.print()
    for i, result in enumerate(results[:max_results], 1):
        display_result(console, result, i)

    if len(results) > max_results:
        console.print(f"... and {len(results) - max_results} more results (see full report)", style="dim")
