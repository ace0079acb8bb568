"""
Renders repositories as a bordered table centered in the terminal.
"""

from abc import ABC, abstractmethod
import io
import math
import os
import sys

from rich import box
from rich.align import Align
from rich.console import Console
from rich.table import Table
from rich.text import Text

from config import get_border_color, logger
from errors import RenderError, TerminalError

HEADERS = ("Name", "Description", "Url", "Last update")
DATE_FORMAT = "%d-%m-%Y"


class DisplayGeometry(ABC):
    """Describes the current display geometry in character cells."""

    @abstractmethod
    def size(self):
        """Returns (width, height)."""


class TerminalGeometry(DisplayGeometry):
    """Geometry of the terminal attached to `stream` (stdout by default)."""

    def __init__(self, stream=None):
        self.stream = stream

    def size(self):
        stream = self.stream or sys.stdout
        try:
            columns, lines = os.get_terminal_size(stream.fileno())
        except (AttributeError, OSError, ValueError) as e:
            raise TerminalError(f"cannot determine terminal size: {e}") from e
        return columns, lines


class FixedGeometry(DisplayGeometry):
    """A synthetic geometry for tests and non-interactive output."""

    def __init__(self, width, height):
        self.width = width
        self.height = height

    def size(self):
        return self.width, self.height


def table_width(width):
    """Terminal width minus a margin of floor(width ** 0.2) cells."""
    if width <= 0:
        return 0
    return max(width - math.floor(width ** 0.2), 0)


def border_style(color):
    """Palette indexes become rich color(n) styles; names pass through."""
    color = str(color)
    return f"color({color})" if color.isdigit() else color


def build_table(repos, width, border_color):
    table = Table(
        *HEADERS,
        width=table_width(width),
        box=box.ROUNDED,
        border_style=border_style(border_color),
    )
    # Repository text is shown verbatim, never parsed as console markup
    for repo in repos:
        table.add_row(
            Text(repo.name),
            Text(repo.description),
            Text(repo.url),
            repo.updated_at.strftime(DATE_FORMAT),
        )
    return table


def render_repos(repos, geometry=None, border_color=None):
    """
    Render repositories as a table centered in the display.

    Args:
        repos (list[Repository]): Rows, rendered in the given order.
        geometry (DisplayGeometry, optional): Defaults to the terminal behind stdout.
        border_color (str, optional): ANSI 256 color of the border.

    Returns:
        str: The table, padded to the full width and half the height of the display.

    Raises:
        RenderError: If the display size is unknown or the table cannot be laid out.
    """
    geometry = geometry or TerminalGeometry()
    border_color = border_color or get_border_color()
    try:
        width, height = geometry.size()
    except TerminalError as e:
        raise RenderError(str(e)) from e

    logger.debug(f"Rendering {len(repos)} repositories in a {width}x{height} display")
    try:
        table = build_table(repos, width, border_color)
        console = Console(
            file=io.StringIO(),
            width=width,
            height=height,
            force_terminal=True,
            color_system="256",
        )
        with console.capture() as capture:
            console.print(Align.center(table, vertical="middle", height=height // 2))
    except Exception as e:
        raise RenderError(f"failed to lay out table: {e}") from e
    return capture.get()
