"""Output formatters for the Twitch Helix client."""

from twitch_helix.output.console import Console
from twitch_helix.output.json_writer import build_report, write_json_report

__all__ = ["Console", "build_report", "write_json_report"]
