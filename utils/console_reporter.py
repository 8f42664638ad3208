"""Console output utilities."""

from rich.console import Console
from rich.table import Table


class ConsoleReporter:
    """Manages formatted console messages for the command line."""

    def __init__(self, console: Console = None):
        """Initialize reporter with console."""
        self.console = console or Console()

    def print_header(self, message: str):
        """Print formatted header message."""
        self.console.print(f"🗓️  [bold magenta]{message}[/bold magenta]\n")

    def print_info(self, message: str):
        """Print information message."""
        self.console.print(message)

    def print_success(self, message: str):
        """Print success message."""
        self.console.print(f"✅ {message}")

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"❌ {message}")

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"⚠️  {message}")

    def print_range_summary(self, date_range, label: str, token: str,
                            quick_option_label: str = None):
        """
        Print an applied range as a table.

        Args:
            date_range: Emitted DateRange
            label: Human readable button label
            token: Encoded "start-end" timestamp token
            quick_option_label: Label of the matching quick option, if any
        """
        table = Table(title="Applied Date Range", show_header=True)
        table.add_column("Field", style="bold cyan")
        table.add_column("Value")

        table.add_row("Label", label)
        table.add_row("Start", date_range.start_date.value.isoformat(timespec="milliseconds"))
        table.add_row("End", date_range.end_date.value.isoformat(timespec="milliseconds"))
        table.add_row("Start timestamp", str(date_range.start_date.timestamp))
        table.add_row("End timestamp", str(date_range.end_date.timestamp))
        table.add_row("Token", token)
        table.add_row("Quick option", quick_option_label or "-")

        self.console.print(table)
