from __future__ import annotations

import pytest

from openai_scientist.synth.sanitize import (
    drop_degenerate_rows,
    drop_header_rules,
    join_split_table_cells,
    normalize_bullet_markers,
    normalize_ordered_markers,
    pad_closing_fences,
    relabel_r_fences,
    sanitize_markdown,
    strip_marker_indent,
    to_rmarkdown_chunks,
)


def test_marker_indent_is_stripped() -> None:
    assert strip_marker_indent("   ### Title") == "### Title"
    assert strip_marker_indent("text\n\t- item\n  * other") == "text\n- item\n* other"
    # Indented prose is left alone.
    assert strip_marker_indent("    code = 1") == "    code = 1"


def test_rules_next_to_headers_are_removed() -> None:
    assert drop_header_rules("---\n# Title\ntext") == "# Title\ntext"
    assert drop_header_rules("## Part\n---\nbody") == "## Part\nbody"
    assert drop_header_rules("intro\n---\n\n## Part") == "intro\n## Part"


def test_rules_between_paragraphs_are_kept() -> None:
    text = "para one\n\n---\n\npara two"
    assert drop_header_rules(text) == text


def test_ordered_markers_are_normalized() -> None:
    assert normalize_ordered_markers("  1)  first\n10.\tsecond") == "1. first\n10. second"
    assert normalize_ordered_markers("3.14 is not a list") == "3.14 is not a list"


@pytest.mark.parametrize(
    "text",
    [
        "1. a\n2. b",
        "  1)  a\n   2.    b",
        "no list here",
        "7)x\n 8. y\n\n9.\tz",
    ],
)
def test_ordered_marker_pass_is_idempotent(text: str) -> None:
    once = normalize_ordered_markers(text)
    assert normalize_ordered_markers(once) == once


def test_bullet_markers_are_normalized() -> None:
    assert normalize_bullet_markers("* a\n   -   b\n**bold** line") == "- a\n- b\n**bold** line"


def test_split_cell_boundary_is_joined() -> None:
    assert join_split_table_cells("| A |\n| B |") == "| A | B |"


def test_well_formed_table_is_untouched() -> None:
    table = "| h1 | h2 |\n|---|---|\n| a | b |\n| c | d |"
    assert join_split_table_cells(table) == table


def test_split_row_inside_table_is_joined_up_to_header_width() -> None:
    table = "| h1 | h2 |\n|:--:|:--:|\n| a |\n| b |\n| c | d |"
    assert join_split_table_cells(table) == "| h1 | h2 |\n|:--:|:--:|\n| a | b |\n| c | d |"


def test_degenerate_row_is_removed_and_order_kept() -> None:
    text = "before\n| x | y |\n| NA |  |\n| 1 | 2 |\n|  | NA |\nafter"
    assert drop_degenerate_rows(text) == "before\n| x | y |\n| 1 | 2 |\nafter"


def test_placeholder_without_empty_neighbour_is_kept() -> None:
    text = "| NA | 5 |\n| NA | NA |\nNA | |"
    assert drop_degenerate_rows(text) == text


def test_sanitize_markdown_runs_passes_in_order() -> None:
    raw = "   ## Heading\n---\n  1)  one\n  * two"
    assert sanitize_markdown(raw) == "## Heading\n1. one\n- two"


def test_sanitize_markdown_keeps_degenerate_rows_unless_asked() -> None:
    raw = "| h | v |\n|---|---|\n| NA |  |\n| a | b |"
    assert "| NA |  |" in sanitize_markdown(raw)
    assert sanitize_markdown(raw, drop_degenerate=True) == "| h | v |\n|---|---|\n| a | b |"


def test_r_fences_are_relabelled() -> None:
    text = "```r\nx\n```\n```R\ny\n```\n```rust\nz\n```\n```python\nw\n```"
    out = relabel_r_fences(text)
    assert out.count("```{r, message=FALSE}") == 2
    assert "```rust" in out
    assert "```python" in out


def test_closing_fences_get_one_blank_line() -> None:
    text = "```{r, message=FALSE}\nplot(x)\n```\nNext\n```{r, message=FALSE}\nhist(y)\n```\n\n\nEnd"
    assert pad_closing_fences(text) == (
        "```{r, message=FALSE}\nplot(x)\n```\n\nNext\n```{r, message=FALSE}\nhist(y)\n```\n\nEnd"
    )


def test_to_rmarkdown_chunks() -> None:
    text = "Intro\n```r\nlibrary(ggplot2)\nggplot(dataset)\n```\nText"
    assert to_rmarkdown_chunks(text) == (
        "Intro\n```{r, message=FALSE}\nlibrary(ggplot2)\nggplot(dataset)\n```\n\nText"
    )


def test_empty_chunk_does_not_swallow_next_chunk() -> None:
    text = "```r\n```\nText\n```r\nplot(x)\n```\nEnd"
    assert to_rmarkdown_chunks(text) == (
        "```{r, message=FALSE}\n```\n\nText\n```{r, message=FALSE}\nplot(x)\n```\n\nEnd"
    )


def test_prose_ending_in_pipe_is_not_joined_to_table() -> None:
    text = "Choose a | b |\n| A | B |\n|---|---|\n| 1 | 2 |"
    assert join_split_table_cells(text) == text
