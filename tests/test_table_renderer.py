import io
import re
from datetime import datetime, timezone

import pytest

from errors import RenderError, TerminalError
from github_client import Repository
from table_renderer import (
    DisplayGeometry,
    FixedGeometry,
    TerminalGeometry,
    border_style,
    render_repos,
    table_width,
)

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def repo(name, description="", updated=datetime(2024, 1, 2, tzinfo=timezone.utc)):
    return Repository(
        name=name,
        description=description,
        language="Go",
        updated_at=updated,
        url=f"https://github.com/octocat/{name}",
        is_fork=False,
    )


@pytest.mark.parametrize(
    "width, expected",
    [(1, 0), (0, 0), (80, 78), (100, 98), (200, 198), (250, 247)],
)
def test_table_width_leaves_slowly_growing_margin(width, expected):
    assert table_width(width) == expected


def test_border_style_accepts_palette_index_or_name():
    assert border_style("92") == "color(92)"
    assert border_style(92) == "color(92)"
    assert border_style("magenta") == "magenta"


def test_render_lists_rows_in_given_order_with_formatted_dates():
    repos = [
        repo("zeta", updated=datetime(2023, 5, 6, tzinfo=timezone.utc)),
        repo("alpha", updated=datetime(2024, 1, 2, tzinfo=timezone.utc)),
    ]

    output = plain(render_repos(repos, FixedGeometry(120, 40)))

    for header in ("Name", "Description", "Url", "Last update"):
        assert header in output
    assert output.index("zeta") < output.index("alpha")
    assert "06-05-2023" in output
    assert "02-01-2024" in output


def test_render_centers_table_in_display():
    output = plain(render_repos([repo("A")], FixedGeometry(100, 40)))
    lines = output.splitlines()

    # Vertically: padded to half the display height
    assert len(lines) == 20
    assert lines[0].strip() == ""
    assert lines[-1].strip() == ""

    border = next(line for line in lines if line.strip())
    assert len(border) == 100
    assert len(border.strip()) == 98
    # One cell of margin on each side
    assert border.index(border.strip()) == 1


def test_render_colors_the_border():
    output = render_repos([repo("A")], FixedGeometry(100, 40), border_color="92")
    assert "38;5;92" in output


def test_render_empty_sequence_shows_headers_only():
    output = plain(render_repos([], FixedGeometry(100, 40)))
    assert "Name" in output
    assert "Last update" in output
    assert "github.com" not in output


def test_render_wraps_terminal_errors():
    class BrokenGeometry:
        def size(self):
            raise TerminalError("not a terminal")

    with pytest.raises(RenderError) as excinfo:
        render_repos([], BrokenGeometry())

    assert isinstance(excinfo.value.__cause__, TerminalError)


def test_terminal_geometry_fails_without_a_terminal():
    with pytest.raises(TerminalError):
        TerminalGeometry(io.StringIO()).size()


def test_render_shows_bracketed_text_verbatim():
    repos = [
        repo("A", "Parser for [/x] closing tags"),
        repo("B", "Supports [bold] and [link] syntax"),
        repo("[red]x"),
    ]

    output = plain(render_repos(repos, FixedGeometry(160, 40)))

    assert "[/x]" in output
    assert "[bold]" in output
    assert "[link]" in output
    assert "[red]x" in output


@pytest.mark.parametrize("width, height", [(0, 0), (1, 1)])
def test_render_survives_tiny_displays(width, height):
    output = render_repos([repo("A", "tiny")], FixedGeometry(width, height))
    assert isinstance(output, str)


def test_display_geometry_is_abstract():
    with pytest.raises(TypeError):
        DisplayGeometry()
