"""
CSV export of the movement projection.

Every field is double-quoted with embedded quotes doubled, the header row
holds the quoted column labels, rows are joined with '\n' and missing values
are written as "".
"""
from __future__ import annotations

import csv
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from ..config import get_config
from ..data.models import Movement
from ..logging import get_logger

logger = get_logger(__name__)

EXPORT_COLUMNS = [
    "ID", "SKU", "Description", "Status", "Priority", "Category",
    "Origin DC", "Destination DC", "Quantity", "Estimated Savings",
    "Created At", "Required By",
]


def _cell(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def format_movements_for_export(
    movements: Iterable[Movement],
    resolve_name: Callable[[str], str],
) -> List[Dict[str, Any]]:
    """Flatten movements into labeled records, one per movement."""
    return [
        {
            "ID": m.id,
            "SKU": m.sku,
            "Description": m.description,
            "Status": m.status,
            "Priority": m.priority,
            "Category": m.category or "N/A",
            "Origin DC": resolve_name(m.origin_dc),
            "Destination DC": resolve_name(m.destination_dc),
            "Quantity": m.quantity,
            "Estimated Savings": m.estimated_savings,
            "Created At": _cell(m.created_at),
            "Required By": _cell(m.required_by),
        }
        for m in movements
    ]


def to_csv_text(records: Sequence[Dict[str, Any]], columns: Optional[Sequence[str]] = None) -> str:
    """Serialize records; columns default to the keys of the first record.

    No records serialize to an empty string.
    """
    if not records:
        return ""
    if columns is None:
        columns = list(records[0].keys())
    frame = pd.DataFrame(
        [[_cell(record.get(col)) for col in columns] for record in records],
        columns=list(columns),
        dtype=object,
    )
    text = frame.to_csv(index=False, quoting=csv.QUOTE_ALL, na_rep="", lineterminator="\n")
    return text.rstrip("\n")


def default_export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"inventory-movements-{today.isoformat()}.csv"


def export_movements_csv(movements: Sequence[Movement], resolve_name: Callable[[str], str]) -> Optional[str]:
    """Return CSV text for the movements, or None (with a warning) when there is nothing to export."""
    if not movements:
        logger.warning("No data to export")
        return None
    return to_csv_text(format_movements_for_export(movements, resolve_name), EXPORT_COLUMNS)


def export_movements_to_csv(
    movements: Sequence[Movement],
    resolve_name: Callable[[str], str],
    filename: Optional[str] = None,
    directory: Optional[str | Path] = None,
) -> Optional[Path]:
    """Write the movements to a CSV file and return its path.

    An empty projection writes nothing and returns None.
    """
    text = export_movements_csv(movements, resolve_name)
    if text is None:
        return None

    target = Path(directory or get_config().export_dir) / (filename or default_export_filename())
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    logger.info(f"Exported {len(movements)} movements to {target}")
    return target
