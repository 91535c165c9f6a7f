# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Print lists of flat dicts as aligned tables"""
from __future__ import annotations

from typing import Any, Collection, Iterator, Mapping, Sequence, TextIO

import json
import sys

ResultType = Collection[Mapping[str, Any]]


def format_item(value: Any) -> str:
    if isinstance(value, str):
        # quote strings only when they contain something that would be ambiguous unquoted
        if value and value.strip() == value and value.isprintable():
            return value
        return json.dumps(value)
    if value is None:
        return ""
    return "{}".format(value)


def yield_table(
    result: ResultType,
    table_layout: Sequence[str] | None = None,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts as a table yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Columns to print, in order. Defaults to sorted keys of all rows.
    :param bool header: True to print the column names
    """
    formatted_rows = [{key: format_item(value) for key, value in item.items()} for item in result]
    if table_layout is None:
        table_layout = sorted({key for row in formatted_rows for key in row})

    widths = {column: len(column) for column in table_layout}
    for row in formatted_rows:
        for column in table_layout:
            widths[column] = max(widths[column], len(row.get(column, "")))

    if header:
        yield "  ".join(column.upper().ljust(widths[column]) for column in table_layout).rstrip()
        yield "  ".join("=" * widths[column] for column in table_layout)
    for row in formatted_rows:
        yield "  ".join(row.get(column, "").ljust(widths[column]) for column in table_layout).rstrip()


def print_table(
    result: ResultType | None,
    table_layout: Sequence[str] | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a nicer table format"""
    if not result:
        return
    for row in yield_table(result, table_layout=table_layout, header=header):
        print(row, file=file or sys.stdout)
