"""Descriptive statistics per series over a record subset."""

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Context, Decimal

import pandas as pd

from labor_stats_explorer.models import DataPoint, SeriesStatistics


_CENTS = Decimal("0.01")
# Wide enough for every finite float at cent resolution
_WIDE = Context(prec=400)


def format_2dp(value: float) -> str:
    """Round half away from zero to 2 decimals, e.g. 0.125 -> '0.13'.

    Non-finite values (an overflowing mean) come back as 'inf', '-inf' or 'nan'.
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    return str(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_WIDE))


def parse_values(records: Sequence[DataPoint]) -> pd.DataFrame:
    """DataFrame of (id, value) with unparseable and infinite values dropped."""
    df = pd.DataFrame(
        {
            "id": [r.id for r in records],
            "value": [r.value for r in records],
        }
    )
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    df["value"] = df["value"].replace([math.inf, -math.inf], math.nan)
    return df.dropna(subset=["value"])


def series_statistics(values: pd.Series) -> SeriesStatistics | None:
    """Statistics for one series' parsed values, None if there are none."""
    values = values.dropna()
    if values.empty:
        return None

    # Mode is taken over values rounded to cents; ties go to the smallest
    rounded = values.map(format_2dp)
    counts = rounded.value_counts(sort=False)
    modes = counts[counts == counts.max()].index
    mode = min(modes, key=float)

    return SeriesStatistics(
        total_count=int(values.size),
        average=format_2dp(values.mean()),
        median=format_2dp(values.median()),
        mode=mode,
        min=format_2dp(values.min()),
        max=format_2dp(values.max()),
    )


def summarize(records: Sequence[DataPoint]) -> dict[str, SeriesStatistics]:
    """
    Compute statistics for every series id present in the records.

    Series with no parseable values are left out. Empty input gives an
    empty dict.
    """
    if not records:
        return {}

    valid = parse_values(records)
    stats: dict[str, SeriesStatistics] = {}
    for series_id, group in valid.groupby("id", sort=False):
        result = series_statistics(group["value"])
        if result is not None:
            stats[series_id] = result
    return stats
