"""Display formatting shared by the page, the detail view and the insights."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Union

from ..data.models import Movement

Number = Union[int, float, Decimal]


def format_currency(amount: Number) -> str:
    """USD with thousands separators and at most two decimals: 12500 -> '$12,500'."""
    text = f"{abs(amount):,.2f}".rstrip("0").rstrip(".")
    return f"-${text}" if amount < 0 else f"${text}"


def format_number(value: Number) -> str:
    return f"{value:,}"


def format_date(value: Union[date, datetime, str]) -> str:
    """'Nov 1, 2024' style dates; ISO strings are accepted."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return f"{value:%b} {value.day}, {value.year}"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def describe_movement(movement: Movement, resolve_name: Callable[[str], str]) -> str:
    """Multi-line detail text for a single movement."""
    lines = [
        "Movement Details:",
        f"• ID: {movement.id}",
        f"• SKU: {movement.sku}",
        f"• Description: {movement.description}",
        f"• Status: {movement.status}",
        f"• Priority: {movement.priority}",
        f"• Category: {movement.category or 'N/A'}",
        f"• From: {resolve_name(movement.origin_dc)}",
        f"• To: {resolve_name(movement.destination_dc)}",
        f"• Quantity: {format_number(movement.quantity)} units",
        f"• Est. Savings: {format_currency(movement.estimated_savings)}",
        f"• Created: {format_date(movement.created_at)}",
        f"• Required By: {format_date(movement.required_by)}",
    ]
    return "\n".join(lines)
