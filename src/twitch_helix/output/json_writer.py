"""JSON output writer for Helix results."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import BaseModel


class ResultReport(BaseModel):
    """Fetched items plus metadata, as written to disk."""

    kind: str  # "streams" or "games"
    generated_at: datetime
    count: int
    data: list[dict[str, Any]]


def build_report(kind: str, items: Sequence[BaseModel]) -> dict[str, Any]:
    """Build a JSON-ready report from fetched items.

    Items are dumped with their API field names (``type`` rather than ``type_``).
    """
    report = ResultReport(
        kind=kind,
        generated_at=datetime.now(),
        count=len(items),
        data=[item.model_dump(mode="json", by_alias=True) for item in items],
    )
    return report.model_dump(mode="json")


def write_json_report(
    report: dict[str, Any],
    output_path: Optional[Path] = None,
    kind: str = "streams",
) -> Path:
    """Write a report to a JSON file.

    Args:
        report: Report dictionary from build_report
        output_path: Output file path (optional, auto-generated if not provided)
        kind: Result kind, used in the generated filename

    Returns:
        Path to the written file
    """
    if output_path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path(f"twitch_{kind}_{timestamp}.json")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)

    return output_path
