#!/usr/bin/env python3
"""
Output formatting utilities for tridinspect
"""

import csv
import io
import json
from typing import Any

from rich.table import Table

CSV_FIELDS = [
    "file",
    "rank",
    "probability",
    "extension",
    "name",
    "mime_type",
    "related_url",
    "definition",
    "remarks",
    "error",
]


class OutputFormatter:
    """Format scan results for different output types

    ``results`` is a list of per-file dictionaries as produced by
    ``BatchItem.to_dict()``.
    """

    def __init__(self, results: list[dict[str, Any]]):
        self.results = results

    def to_json(self, indent: int = 2) -> str:
        """Convert results to JSON format"""
        return json.dumps(self.results, indent=indent, default=str)

    def to_csv(self, delimiter: str = ",") -> str:
        """Convert results to CSV, one row per match (or per failed file)"""
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=CSV_FIELDS, delimiter=delimiter)
        writer.writeheader()

        for result in self.results:
            error = result.get("error")
            if error:
                writer.writerow({"file": result["file"], "error": error["category"]})
                continue
            for rank, match in enumerate(result.get("matches", []), start=1):
                writer.writerow({"file": result["file"], "rank": rank, **match, "error": ""})

        return output.getvalue()

    @staticmethod
    def match_table(result: dict[str, Any]) -> Table:
        """Build a rich table listing the matches of one file"""
        table = Table(title=result["file"], show_header=True, expand=True)
        table.add_column("%", style="bold green", justify="right", no_wrap=True)
        table.add_column("Ext", style="cyan", no_wrap=True)
        table.add_column("File type", overflow="fold")
        table.add_column("MIME", style="magenta", overflow="fold")
        table.add_column("Definition", style="dim", overflow="fold")

        for match in result.get("matches", []):
            table.add_row(
                f"{match['probability']:.2f}",
                match["extension"],
                match["name"],
                match.get("mime_type") or "-",
                match.get("definition") or "-",
            )

        return table
