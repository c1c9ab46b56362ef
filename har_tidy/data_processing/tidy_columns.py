from __future__ import annotations

from typing import List, Tuple

import pandas as pd

from har_tidy.data_processing.schemas import KEY_COLS

# Applied top to bottom, every occurrence replaced, each step feeding the next.
# Domain prefixes go before Acc -> Accel, and the "-mean()-" / "-std()-" forms
# must run before their dash-less versions or a trailing '-' is left behind.
TIDY_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    ("tBody", "Time.Body."),
    ("tGravity", "Time.Gravity."),
    ("fBody", "Frequency.Body."),
    ("Acc", "Accel"),
    ("-mean()-", ".Mean."),
    ("-std()-", ".StdDev."),
    ("-mean()", ".Mean"),
    ("-std()", ".StdDev"),
)


def tidy_column_name(name: str) -> str:
    for old, new in TIDY_SUBSTITUTIONS:
        name = name.replace(old, new)
    return name


def tidy_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Renames measurement columns; Subject.ID / Activity.Type are left alone."""
    names: List[str] = [c if c in KEY_COLS else tidy_column_name(c) for c in df.columns]
    out = df.copy()
    out.columns = names
    return out
