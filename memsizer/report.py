"""
Terminal and JSON rendering of ranked collection reports.
"""

import json
from typing import List, Optional

from rich.console import Console

from .models.stats import BYTES_PER_MEGABYTE, BYTES_PER_GIGABYTE, CollectionReport

SEPARATOR = "-" * 100


def render_text(reports: List[CollectionReport], multiplier: float,
                console: Optional[Console] = None) -> None:
    """
    Print ranked reports with colors.

    Args:
        reports: Reports, already ranked
        multiplier: Safety multiplier for the recommended figure
        console: Target console, stdout by default
    """
    console = console or Console()
    succeeded = [report for report in reports if report.succeeded]
    failed = [report for report in reports if not report.succeeded]

    if succeeded:
        console.print(SEPARATOR, style="cyan", markup=False, highlight=False, soft_wrap=True)
    for report in succeeded:
        stats = report.stats
        console.print(
            f"{report.collection.name}: {report.total_megabytes:.2f} MB ({report.total_gigabytes:.2f} GB)",
            style="green", markup=False, highlight=False, soft_wrap=True,
        )
        for line in (
            f"Recommended memory usage: {report.recommended_megabytes(multiplier):.2f} MB",
            f"Documents: {stats.document_count}",
            f"Average memory usage per document: {stats.average:.2f} bytes",
            f"Median memory usage per document: {stats.median:.2f} bytes",
            f"Standard deviation of memory usage per document: {stats.standard_deviation:.2f} bytes",
        ):
            console.print(line, style="yellow", markup=False, highlight=False, soft_wrap=True)
        console.print(SEPARATOR, style="cyan", markup=False, highlight=False, soft_wrap=True)

    if succeeded:
        grand_total = sum(report.stats.total for report in succeeded)
        console.print(
            f"All collections: {grand_total / BYTES_PER_MEGABYTE:.2f} MB "
            f"({grand_total / BYTES_PER_GIGABYTE:.2f} GB), "
            f"recommended {grand_total * multiplier / BYTES_PER_MEGABYTE:.2f} MB",
            style="bold green", markup=False, highlight=False, soft_wrap=True,
        )

    for report in failed:
        error = report.error or {}
        console.print(
            f"{report.collection.name}: failed ({error.get('kind', 'error')}): {error.get('message', '')}",
            style="red", markup=False, highlight=False, soft_wrap=True,
        )


def render_json(reports: List[CollectionReport], multiplier: float) -> str:
    """Serialize ranked reports to JSON."""
    succeeded = [report for report in reports if report.succeeded]
    grand_total = sum(report.stats.total for report in succeeded)
    payload = {
        "safety_multiplier": multiplier,
        "total_bytes": grand_total,
        "recommended_mb": round(grand_total * multiplier / BYTES_PER_MEGABYTE, 2),
        "collections": [report.to_dict(multiplier) for report in reports],
    }
    return json.dumps(payload, indent=2)
