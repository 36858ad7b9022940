from __future__ import annotations

import json
from typing import Any, Literal

import yaml
from rich.console import Console
from rich.table import Table

from mollie_sdk.utils.serialization import to_plain_data

OutputFormat = Literal["json", "yaml", "table"]


def flatten(value: Any, prefix: str = "") -> dict[str, Any]:
    """Flatten nested resources into dotted keys; link objects collapse to their href."""

    if not isinstance(value, dict):
        return {prefix: value}

    if prefix and set(value) <= {"href", "type"} and "href" in value:
        return {prefix: value["href"]}

    rows: dict[str, Any] = {}
    for key, item in value.items():
        name = str(key).lstrip("_")
        path = f"{prefix}.{name}" if prefix else name
        if isinstance(item, dict):
            rows.update(flatten(item, path))
        elif isinstance(item, list) and any(isinstance(entry, dict) for entry in item):
            for index, entry in enumerate(item):
                rows.update(flatten(entry, f"{path}[{index}]"))
        else:
            rows[path] = item
    return rows


def emit(value: Any, *, output: OutputFormat = "json", console: Console | None = None) -> None:
    """Render SDK/CLI output as json, yaml, or table."""

    plain = to_plain_data(value)
    if output == "json":
        print(json.dumps(plain, indent=2))
        return
    if output == "yaml":
        print(yaml.safe_dump(plain, sort_keys=False))
        return

    console = console or Console()
    if isinstance(plain, dict):
        table = Table(show_header=True, header_style="bold")
        table.add_column("field")
        table.add_column("value")
        for key, val in flatten(plain).items():
            table.add_row(key, "" if val is None else str(val))
        console.print(table)
        return

    if isinstance(plain, list) and plain:
        for entry in plain:
            emit(entry, output="table", console=console)
        return

    console.print(str(plain))
