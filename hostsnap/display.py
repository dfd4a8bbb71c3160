"""Report output using Rich."""
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from .config.config import Config
from .core.report import ReportLine


class ReportPrinter:
    """Writes report lines to standard output, one per line."""

    def __init__(self, config: Config, console: Optional[Console] = None):
        """Initialize the printer."""
        self.config = config
        self.console = console or Console(
            no_color=not config.display.show_colors,
            highlight=False,
            soft_wrap=True,
        )

    def print_report(self, lines: List[ReportLine]):
        """Print every line, styling failures when colours are enabled."""
        for line in lines:
            style = "red" if not line.ok and self.config.display.show_colors else ""
            self.console.print(Text(line.text, style=style))
