from __future__ import annotations

import math
import re
from typing import Any

import pandas as pd

# Ragged summary columns are padded with this token, as R pads summary() tables.
PLACEHOLDER = "NA"

_NUMERIC_LABELS = ("Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max.")
_QUANTILES = (0.0, 0.25, 0.5, None, 0.75, 1.0)
_NA_LABEL = "NA's"
_LABEL_WIDTH = 8

_R_SYNTACTIC_NAME = re.compile(r"^(?:[A-Za-z]|\.(?![0-9]))[A-Za-z0-9._]*$")
_R_DOTS = re.compile(r"^\.\.(?:\.|[0-9]+)$")
_R_RESERVED = frozenset(
    {
        "if", "else", "repeat", "while", "function", "for", "in", "next", "break",
        "TRUE", "FALSE", "NULL", "Inf", "NaN", "NA", "NA_integer_", "NA_real_", "NA_character_", "NA_complex_",
    }
)
# Named arguments of data.frame(); a column with one of these names would be taken as the argument.
_DATA_FRAME_FORMALS = frozenset({"row.names", "check.rows", "check.names", "fix.empty.names", "stringsAsFactors"})


def summarize_dataframe(df: pd.DataFrame, *, max_levels: int = 6) -> str:
    """Render column-wise descriptive statistics as a fixed-width text table.

    Layout follows R's `summary(data.frame)`:
    - one column per variable, one `label:value` cell per statistic
    - numeric: Min., 1st Qu., Median, Mean, 3rd Qu., Max. (+ NA's)
    - boolean: FALSE / TRUE counts (+ NA's)
    - categorical/string: most frequent levels, rest folded into (Other) (+ NA's)
    - datetime: the numeric labels over timestamps (+ NA's)

    The result is deterministic for a given frame.
    """

    if df.shape[1] == 0:
        return ""

    cells: dict[str, list[str]] = {}
    for col in df.columns:
        s = df[col]
        if pd.api.types.is_bool_dtype(s):
            column_cells = _bool_cells(s)
        elif pd.api.types.is_datetime64_any_dtype(s):
            column_cells = _datetime_cells(s)
        elif pd.api.types.is_numeric_dtype(s):
            column_cells = _numeric_cells(s)
        else:
            column_cells = _level_cells(s, max_levels=max_levels)
        cells[str(col)] = column_cells

    height = max(len(v) for v in cells.values())
    padded = {k: v + [PLACEHOLDER] * (height - len(v)) for k, v in cells.items()}
    table = pd.DataFrame(padded, columns=list(padded.keys()))
    return table.to_string(index=False)


def _cell(label: str, value: Any) -> str:
    return f"{label:<{_LABEL_WIDTH}}:{value}"


def _fmt_number(x: float) -> str:
    if math.isnan(x):
        return PLACEHOLDER
    return f"{x:.4g}"


def _na_cells(series: pd.Series) -> list[str]:
    missing = int(series.isna().sum())
    return [_cell(_NA_LABEL, missing)] if missing else []


def _numeric_cells(series: pd.Series) -> list[str]:
    s = pd.to_numeric(series, errors="coerce").dropna()
    out: list[str] = []
    for label, q in zip(_NUMERIC_LABELS, _QUANTILES):
        if s.empty:
            value = float("nan")
        elif q is None:
            value = float(s.mean())
        else:
            value = float(s.quantile(q, interpolation="linear"))
        out.append(_cell(label, _fmt_number(value)))
    return out + _na_cells(series)


def _datetime_cells(series: pd.Series) -> list[str]:
    s = series.dropna()
    out: list[str] = []
    for label, q in zip(_NUMERIC_LABELS, _QUANTILES):
        if s.empty:
            value: Any = PLACEHOLDER
        elif q is None:
            value = s.mean()
        else:
            value = s.quantile(q)
        out.append(_cell(label, value))
    return out + _na_cells(series)


def _bool_cells(series: pd.Series) -> list[str]:
    s = series.dropna().astype(bool)
    counts = s.value_counts()
    out = [
        _cell("FALSE", int(counts.get(False, 0))),
        _cell("TRUE", int(counts.get(True, 0))),
    ]
    return out + _na_cells(series)


def _level_cells(series: pd.Series, *, max_levels: int) -> list[str]:
    counts = series.dropna().astype(str).value_counts(sort=False)
    # Frequency first, then level name, so ties are stable.
    ordered = sorted(counts.items(), key=lambda kv: (-int(kv[1]), kv[0]))
    if len(ordered) > max_levels:
        head = ordered[: max_levels - 1]
        other = sum(int(n) for _, n in ordered[max_levels - 1 :])
        ordered = head + [("(Other)", other)]
    out = [_cell(str(level), int(n)) for level, n in ordered]
    return out + _na_cells(series)


def dataframe_to_r_literal(df: pd.DataFrame) -> str:
    """Render a DataFrame as an R expression that rebuilds it.

    The text is embedded verbatim in the generated Rmarkdown, so large
    frames produce large files.
    """

    if df.shape[1] == 0:
        return "data.frame()"

    names = [str(col) for col in df.columns]
    shadowed = any(name in _DATA_FRAME_FORMALS for name in names)
    arg_names = [f"V{i}" for i in range(1, len(names) + 1)] if shadowed else [_r_name(name) for name in names]

    parts = [f"  {arg} = {_r_vector(df[col])}" for arg, col in zip(arg_names, df.columns)]
    parts.append("  check.names = FALSE")
    parts.append("  stringsAsFactors = FALSE")
    literal = "data.frame(\n" + ",\n".join(parts) + "\n)"
    if shadowed:
        labels = ", ".join(_r_string(name) for name in names)
        literal = f"setNames({literal}, c({labels}))"
    return literal


def _r_name(name: str) -> str:
    if _R_SYNTACTIC_NAME.match(name) and name not in _R_RESERVED and not _R_DOTS.match(name):
        return name
    return "`" + name.replace("\\", "\\\\").replace("`", "\\`") + "`"


def _r_string(value: Any) -> str:
    text = str(value)
    text = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\t", "\\t")
    return f'"{text}"'


def _r_number(value: Any, *, integer: bool) -> str:
    if pd.isna(value):
        return "NA"
    if integer:
        return f"{int(value)}L"
    x = float(value)
    if math.isinf(x):
        return "Inf" if x > 0 else "-Inf"
    return repr(x)


def _r_vector(series: pd.Series) -> str:
    if isinstance(series.dtype, pd.CategoricalDtype):
        values = ", ".join("NA" if pd.isna(v) else _r_string(v) for v in series)
        levels = ", ".join(_r_string(v) for v in series.cat.categories)
        return f"factor(c({values}), levels = c({levels}))"

    if pd.api.types.is_bool_dtype(series):
        if series.empty:
            return "logical(0)"
        return "c(" + ", ".join("NA" if pd.isna(v) else ("TRUE" if v else "FALSE") for v in series) + ")"

    if pd.api.types.is_datetime64_any_dtype(series):
        if series.empty:
            return "as.POSIXct(character(0), tz = \"UTC\")"
        if series.dt.tz is not None:
            series = series.dt.tz_convert("UTC")
        values = ", ".join("NA" if pd.isna(v) else _r_string(pd.Timestamp(v).strftime("%Y-%m-%d %H:%M:%S")) for v in series)
        return f"as.POSIXct(c({values}), tz = \"UTC\")"

    if pd.api.types.is_numeric_dtype(series):
        integer = pd.api.types.is_integer_dtype(series)
        if series.empty:
            return "integer(0)" if integer else "numeric(0)"
        return "c(" + ", ".join(_r_number(v, integer=integer) for v in series) + ")"

    if series.empty:
        return "character(0)"
    return "c(" + ", ".join("NA" if pd.isna(v) else _r_string(v) for v in series) + ")"
