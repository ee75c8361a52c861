"""Output formatters for CLI display."""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()


def format_json(data: Any) -> str:
    """Serialize a decoded API response as indented JSON."""
    return json.dumps(data, ensure_ascii=False, indent=2)


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, list):
        if any(isinstance(item, (dict, list)) for item in value):
            return f"{len(value)} items"
        return ", ".join(_cell(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, str):
        return value.strip() or "-"
    return str(value)


def format_table(data: Any, title: str = "Results") -> None:
    """Display a decoded API response as a rich table.

    Lists of objects become one row per object with a column per key.
    A single object is shown as property/value pairs.
    """
    if isinstance(data, dict):
        _format_object(data, title)
        return

    if not isinstance(data, list) or not data:
        console.print("No results found.")
        return

    if not all(isinstance(item, dict) for item in data):
        for item in data:
            console.print(_cell(item))
        return

    columns: list[str] = []
    for item in data:
        for key in item:
            if key not in columns:
                columns.append(key)

    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column, style="cyan" if column == columns[0] else None)

    for item in data:
        table.add_row(*(_cell(item.get(column)) for column in columns))

    console.print(table)


def _format_object(data: dict[str, Any], title: str) -> None:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in data.items():
        table.add_row(str(key), _cell(value))

    console.print(table)


def format_estimates_table(estimates: Any, stop_no: int | str) -> None:
    """Display stop estimates with one row per scheduled departure."""
    if not isinstance(estimates, list) or not estimates:
        console.print(f"No estimates found for stop {stop_no}.")
        return

    table = Table(
        title=f"Next buses at stop {stop_no}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Route", style="cyan", no_wrap=True)
    table.add_column("Direction", style="yellow")
    table.add_column("Destination", style="green")
    table.add_column("Leaves", style="magenta")
    table.add_column("Countdown (min)", style="green")
    table.add_column("Status", style="blue")

    for estimate in estimates:
        if not isinstance(estimate, dict):
            continue
        for schedule in estimate.get("Schedules") or []:
            table.add_row(
                _cell(estimate.get("RouteNo")),
                _cell(estimate.get("Direction")),
                _cell(schedule.get("Destination")),
                _cell(schedule.get("ExpectedLeaveTime")),
                _cell(schedule.get("ExpectedCountdown")),
                _schedule_status(schedule.get("ScheduleStatus")),
            )

    console.print(table)


def _schedule_status(status: Any) -> str:
    # "*" on time, "-" delayed, "+" ahead of schedule
    labels = {"*": "on time", "-": "delayed", "+": "ahead"}
    if isinstance(status, str):
        return labels.get(status.strip(), status.strip() or "-")
    return _cell(status)
