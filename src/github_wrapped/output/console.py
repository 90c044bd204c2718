"""Rich console output for wrap statistics."""

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from github_wrapped.analysis.remarks import Remarks
from github_wrapped.models.statistics import Statistics


def format_stat_value(value: int | str | None) -> str:
    """Numbers with thousands separators, empty values as ``-``."""
    if isinstance(value, int):
        return f"{value:,}"
    if value:
        return str(value)
    return "-"


class Console:
    """Wrapper for rich console output."""

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.console = RichConsole()
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        self.console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str):
        if not self.quiet:
            self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def create_progress(self) -> Progress:
        """Create a spinner for the fetch phase."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            disable=self.quiet,
            transient=True,
        )

    def print_header(self, stats: Statistics):
        """Print the user banner."""
        if self.quiet:
            return

        user = stats.user
        lines = [f"[bold blue]{user.display_name}[/bold blue]", f"[dim]@{user.login}[/dim]"]
        if user.bio:
            lines.append(user.bio)
        self.console.print()
        self.console.print(Panel("\n".join(lines), title="GitHub Wrap", expand=False))

    def print_badges(self, badges: list[str]):
        if self.quiet or not badges:
            return
        self.console.print(Panel("\n".join(badges), title="Your Badges", expand=False))

    def print_stats(self, stats: Statistics):
        """Print the stats grid as a two-column table."""
        if self.quiet:
            return

        table = Table(title="Year in Review", show_header=False, expand=False)
        table.add_column("Stat", style="dim")
        table.add_column("Value", justify="right")

        rows = [
            ("Repositories", stats.repos),
            ("Commits", stats.total_commits),
            ("Stars Earned", stats.total_stars),
            ("Forks", stats.total_forks),
            ("Pull Requests", stats.total_prs),
            ("Issues", stats.total_issues),
            ("Followers", stats.user.followers),
            ("Contributions", stats.contributions),
            ("Peak Day", f"{stats.most_active_day} ({stats.peak_commits_in_day})"),
            ("Peak Week", stats.most_active_week),
            ("Peak Month", stats.most_active_month),
            ("Most Active On", f"{stats.most_active_day_of_week}s"),
        ]
        for label, value in rows:
            table.add_row(label, format_stat_value(value))

        self.console.print(table)

    def print_languages(self, stats: Statistics):
        if self.quiet or not stats.languages:
            return

        table = Table(title="Language Breakdown", expand=False)
        table.add_column("Language")
        table.add_column("Repos", justify="right")
        for lang in stats.languages:
            table.add_row(lang.name, str(lang.count))
        self.console.print(table)

    def print_remarks(self, remarks: Remarks):
        if self.quiet:
            return

        main = remarks.main
        self.console.print(
            Panel(
                f"[bold]{main.message}[/bold]\n\n[yellow]What's next?[/yellow] {main.suggestion}",
                title=main.title,
                expand=False,
            )
        )
        for insight in remarks.insights:
            self.console.print(f"  • {insight}")
        if remarks.fun_fact:
            self.console.print(f"\n[green]Fun fact:[/green] {remarks.fun_fact}")

    def print_wrap(self, stats: Statistics, remarks: Remarks):
        """Print the complete wrap card."""
        self.print_header(stats)
        self.print_badges(stats.badges)
        self.print_stats(stats)
        self.print_languages(stats)
        self.print_remarks(remarks)

    def print_output_path(self, path: str):
        if not self.quiet:
            self.console.print(f"\n[dim]Statistics saved to:[/dim] {path}")
