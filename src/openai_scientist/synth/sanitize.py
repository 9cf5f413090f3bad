"""Regex clean-up of model-generated markdown and Rmarkdown.

Each pass is a pure `str -> str` function that never raises. The passes
work on raw lines and regex matches, not on a parsed document: they also
touch text inside code fences, and they do not guarantee valid markdown.
"""

from __future__ import annotations

import re
from typing import Callable

# Cell token that the model copies from padded summary tables.
PLACEHOLDER_TOKEN = "NA"

RMD_CHUNK_HEADER = "```{r, message=FALSE}"

_MARKER_INDENT = re.compile(r"^[ \t]+(?=#|[-*+][ \t])", re.MULTILINE)

_HEADER = r"#{1,6}(?:[ \t][^\n]*)?"
_RULE_ABOVE_HEADER = re.compile(r"^-{3,}[ \t]*\n(?:[ \t]*\n)*(?=" + _HEADER + r"(?:\n|$))", re.MULTILINE)
_RULE_BELOW_HEADER = re.compile(r"^(" + _HEADER + r"\n)(?:[ \t]*\n)*-{3,}[ \t]*(?:\n|$)", re.MULTILINE)

_ORDERED_MARKER = re.compile(r"^[ \t]*(\d+)[.)][ \t]+", re.MULTILINE)
_BULLET_MARKER = re.compile(r"^[ \t]*[-*][ \t]+", re.MULTILINE)

_TABLE_SEPARATOR = re.compile(r"^[ \t]*\|(?:[ \t]*:?-+:?[ \t]*\|)+[ \t]*$")
_DEGENERATE_CELLS = re.compile(
    r"\|[ \t]*" + PLACEHOLDER_TOKEN + r"[ \t]*\|[ \t]*\|"
    r"|\|[ \t]*\|[ \t]*" + PLACEHOLDER_TOKEN + r"[ \t]*\|"
)

_R_FENCE = re.compile(r"```[rR](?=[ \t]*(?:\n|$))")
_RMD_CHUNK = re.compile(
    r"(" + re.escape(RMD_CHUNK_HEADER) + r"\n(?:.*?\n)??```)(?=[ \t]*(?:\n|$))[ \t]*\n*",
    re.DOTALL,
)


def strip_marker_indent(text: str) -> str:
    """Pass 1: drop indentation in front of header and bullet markers."""
    return _MARKER_INDENT.sub("", text)


def drop_header_rules(text: str) -> str:
    """Pass 2: remove `---` lines sitting directly above or below a header."""
    text = _RULE_BELOW_HEADER.sub(r"\1", text)
    return _RULE_ABOVE_HEADER.sub("", text)


def normalize_ordered_markers(text: str) -> str:
    """Pass 3: `  3)  item` and `3.\\titem` become `3. item`. Idempotent."""
    return _ORDERED_MARKER.sub(r"\1. ", text)


def normalize_bullet_markers(text: str) -> str:
    """Pass 4: `-` and `*` bullets become `- ` at the start of the line."""
    return _BULLET_MARKER.sub("- ", text)


def _is_row(line: str) -> bool:
    return line.lstrip().startswith("|")


def _is_cell_boundary(prev: str, line: str) -> bool:
    return _is_row(prev) and prev.rstrip().endswith("|") and _is_row(line)


def _cell_count(row: str) -> int:
    return len(row.strip().strip("|").split("|"))


def _join_rows(prev: str, line: str) -> str:
    return prev.rstrip()[:-1].rstrip() + " | " + line.lstrip()[1:].lstrip()


def join_split_table_cells(text: str) -> str:
    """Pass 5: re-join a table row that was broken at a cell boundary.

    `| A |\\n| B |` becomes `| A | B |`. Once a header separator row has been
    seen, a row is only extended while it has fewer cells than the header,
    so complete rows of a well-formed table stay on their own lines.
    """
    out: list[str] = []
    expected: int | None = None
    for line in text.split("\n"):
        if out and _is_cell_boundary(out[-1], line):
            prev = out[-1]
            if _TABLE_SEPARATOR.match(line):
                expected = _cell_count(prev)
                out.append(line)
                continue
            if not _TABLE_SEPARATOR.match(prev) and (expected is None or _cell_count(prev) < expected):
                out[-1] = _join_rows(prev, line)
                continue
            out.append(line)
            continue
        if not _is_row(line):
            expected = None
        out.append(line)
    return "\n".join(out)


def is_degenerate_row(line: str) -> bool:
    return _is_row(line) and _DEGENERATE_CELLS.search(line) is not None


def drop_degenerate_rows(text: str) -> str:
    """Pass 6: delete table rows where an `NA` cell touches an empty cell.

    The trigger is deliberately this literal pattern only.
    """
    return "\n".join(line for line in text.split("\n") if not is_degenerate_row(line))


SANITIZATION_PASSES: tuple[Callable[[str], str], ...] = (
    strip_marker_indent,
    drop_header_rules,
    normalize_ordered_markers,
    normalize_bullet_markers,
    join_split_table_cells,
)


def sanitize_markdown(text: str, *, drop_degenerate: bool = False) -> str:
    """Run passes 1-5 in order, and pass 6 as well when asked."""
    for step in SANITIZATION_PASSES:
        text = step(text)
    if drop_degenerate:
        text = drop_degenerate_rows(text)
    return text


def relabel_r_fences(text: str) -> str:
    """```` ```r ```` / ```` ```R ```` become executable chunks with quiet library loading."""
    return _R_FENCE.sub(RMD_CHUNK_HEADER, text)


def pad_closing_fences(text: str) -> str:
    """Leave exactly one blank line after every closing fence of an R chunk."""
    return _RMD_CHUNK.sub(r"\1\n\n", text)


def to_rmarkdown_chunks(text: str) -> str:
    return pad_closing_fences(relabel_r_fences(text))
