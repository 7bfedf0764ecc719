"""Render a repository list as a table, detailed text blocks or JSON."""

import json
from datetime import datetime
from typing import List, Optional, Sequence

from colorama import Fore, Style

from ..domain.models import RepoRecord

DESCRIPTION_MAX_LENGTH = 50
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
TABLE_HEADINGS = ("Name", "Visibility", "Last Updated", "Created At", "Description")


def format_date(value: Optional[str]) -> str:
    """Format an ISO-8601 timestamp; unparseable input is returned as text."""
    if value is None:
        return "N/A"
    try:
        # fromisoformat 在 3.11 之前不认识 "Z" 后缀
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        return datetime.fromisoformat(text).strftime(DATE_FORMAT)
    except (TypeError, ValueError, AttributeError):
        return str(value)


def truncate_text(text: str, max_length: int = DESCRIPTION_MAX_LENGTH) -> str:
    if len(text) > max_length:
        return f"{text[:max_length]}..."
    return text


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{Style.RESET_ALL}" if enabled else text


def render_table(
    title: str,
    headings: Sequence[str],
    rows: Sequence[Sequence[str]],
    color: bool = False,
) -> str:
    """Draw a bordered text table with a centered title row.

    Widths are measured on the plain cell text; with ``color`` the title and
    the first column are highlighted after padding.
    """
    widths = [len(heading) for heading in headings]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    inner = sum(widths) + 3 * (len(widths) - 1)
    if len(title) > inner:
        widths[-1] += len(title) - inner
        inner = len(title)

    def line(cells: Sequence[str], highlight_first: bool = False) -> str:
        padded = [cell.ljust(widths[index]) for index, cell in enumerate(cells)]
        if highlight_first:
            padded[0] = _paint(padded[0], Fore.LIGHTBLUE_EX, color)
        return "| " + " | ".join(padded) + " |"

    title_border = "+" + "-" * (inner + 2) + "+"
    separator = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

    lines = [
        title_border,
        "| " + _paint(title.center(inner), Fore.GREEN, color) + " |",
        separator,
        line(headings),
        separator,
    ]
    lines.extend(line(row, highlight_first=True) for row in rows)
    lines.append(separator)
    return "\n".join(lines)


def format_simple(repos: List[RepoRecord], owner: str, color: bool = False) -> str:
    rows = [
        [
            repo.name,
            repo.visibility if repo.visibility is not None else "N/A",
            format_date(repo.pushed_at),
            format_date(repo.created_at),
            truncate_text(str(repo.description) if repo.description is not None else "No description"),
        ]
        for repo in repos
    ]
    return render_table(f"Repositories for {owner}", TABLE_HEADINGS, rows, color=color)


def format_full(repos: List[RepoRecord]) -> str:
    blocks = []
    for repo in repos:
        visibility_info = f" ({repo.visibility})" if repo.visibility is not None else ""
        blocks.append("\n".join([
            f"{repo.name}{visibility_info}",
            f"  URL: {repo.url}",
            f"  SSH: {repo.ssh_url if repo.ssh_url is not None else 'N/A'}",
            f"  Description: {repo.description if repo.description is not None else 'No description'}",
            f"  Last pushed: {format_date(repo.pushed_at)}",
            f"  Created: {format_date(repo.created_at)}",
        ]))
    return "\n\n".join(blocks)


def format_json(repos: List[RepoRecord]) -> str:
    return json.dumps([repo.to_dict() for repo in repos], indent=2, ensure_ascii=False)


def format_output(
    repos: List[RepoRecord],
    output_format: str,
    owner: str,
    color: bool = False,
) -> str:
    """Render ``repos`` in ``output_format``; unknown formats fall back to the table."""
    if output_format == "full":
        return format_full(repos)
    if output_format == "json":
        return format_json(repos)
    return format_simple(repos, owner, color=color)
