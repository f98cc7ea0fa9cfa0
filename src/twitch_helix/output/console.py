"""Rich console output for Helix results."""

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.table import Table

from twitch_helix.models.game import Game
from twitch_helix.models.stream import Stream


class Console:
    """Wrapper for rich console output."""

    def __init__(self, quiet: bool = False):
        self.console = RichConsole()
        self.quiet = quiet

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def print_streams(self, streams: list[Stream]):
        """Print a table of streams."""
        if self.quiet:
            return

        table = Table(title=f"Top Streams ({len(streams)})", expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Channel")
        table.add_column("Title")
        table.add_column("Game")
        table.add_column("Viewers", justify="right")
        table.add_column("Language", style="dim")

        for position, stream in enumerate(streams, start=1):
            title = stream.title if len(stream.title) <= 60 else stream.title[:60] + "..."
            table.add_row(
                str(position),
                stream.user_name,
                title,
                stream.game_name or stream.game_id or "-",
                f"{stream.viewer_count:,}",
                stream.language,
            )

        self.console.print(table)
        self.console.print()

    def print_games(self, games: list[Game]):
        """Print a table of games."""
        if self.quiet:
            return

        table = Table(title=f"Top Games ({len(games)})", expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name")
        table.add_column("ID", style="dim")

        for position, game in enumerate(games, start=1):
            table.add_row(str(position), game.name, game.id)

        self.console.print(table)
        self.console.print()

    def print_output_path(self, path: str):
        """Print output file path."""
        if not self.quiet:
            self.console.print(f"\n[green]Results saved to:[/green] {path}")
