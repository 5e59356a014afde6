"""Utilities to serialize optimization results into JSON/CSV artifacts."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ...models.domain import DEFAULT_PARALLEL_GROUP, AttributeStat, OptimizationResult, parallel_group_name


def result_to_json(result: OptimizationResult) -> dict:
    return {
        "sequence": [
            {
                "id": item.id,
                "original_index": item.original_index,
                "sequence_number": item.sequence_number,
                "values": dict(item.values),
                "changeover_reasons": list(item.reasons),
                "changeover_time": item.changeover_time,
                "work_time": item.work_time,
                "downtime": item.downtime,
            }
            for item in result.sequence
        ],
        "total_before": result.total_before,
        "total_after": result.total_after,
        "savings": result.savings,
        "savings_percent": result.savings_percent,
        "total_downtime_before": result.total_downtime_before,
        "total_downtime_after": result.total_downtime_after,
        "downtime_savings": result.downtime_savings,
        "downtime_savings_percent": result.downtime_savings_percent,
        "attribute_stats": [asdict(stat) for stat in result.attribute_stats],
    }


def result_to_csv(result: OptimizationResult) -> str:
    buffer = io.StringIO()
    value_columns: list[str] = []
    for item in result.sequence:
        for column in item.values:
            if column not in value_columns:
                value_columns.append(column)
    fieldnames = ["#", "Order ID"] + value_columns + ["Downtime (min)", "Work Time (min)", "Changed Attributes"]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames, lineterminator="\n")
    writer.writeheader()
    for item in result.sequence:
        writer.writerow(
            {
                "#": item.sequence_number,
                "Order ID": item.id,
                **{column: item.values.get(column, "") for column in value_columns},
                "Downtime (min)": item.downtime,
                "Work Time (min)": item.work_time,
                "Changed Attributes": ", ".join(item.reasons) or "-",
            }
        )
    return buffer.getvalue()


def _minutes(value: float) -> object:
    if float(value).is_integer():
        return int(value)
    return value


def _attribute_label(stat: AttributeStat) -> str:
    if stat.parallel_group == DEFAULT_PARALLEL_GROUP:
        return stat.column
    return f"{stat.column} ({parallel_group_name(stat.parallel_group)})"


def result_summary_rows(result: OptimizationResult) -> list[tuple[str, object]]:
    """Metric/value rows: downtime and work time totals, then one line per attribute."""
    rows: list[tuple[str, object]] = [
        ("Total Orders", len(result.sequence)),
        ("Downtime", ""),
        ("Original Downtime (min)", result.total_downtime_before),
        ("Optimized Downtime (min)", result.total_downtime_after),
        ("Downtime Savings (min)", result.downtime_savings),
        ("Downtime Reduction (%)", f"{result.downtime_savings_percent}%"),
        ("Work Time", ""),
        ("Original Work Time (min)", result.total_before),
        ("Optimized Work Time (min)", result.total_after),
        ("Work Time Savings (min)", result.savings),
        ("Work Time Reduction (%)", f"{result.savings_percent}%"),
        ("Attribute Breakdown", ""),
    ]
    for stat in result.attribute_stats:
        rows.append((_attribute_label(stat), f"{stat.changeover_count} changes, {_minutes(stat.total_time)} min"))
    return rows


def summary_to_csv(result: OptimizationResult) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Metric", "Value"])
    writer.writerows(result_summary_rows(result))
    return buffer.getvalue()
