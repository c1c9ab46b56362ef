from __future__ import annotations

import logging
from typing import List

import pandas as pd

from har_tidy.data_processing.schemas import ACTIVITY_COL, KEY_COLS, SUBJECT_COL

log = logging.getLogger(__name__)


def measurement_columns(df: pd.DataFrame) -> List[str]:
    """Everything except the grouping keys, excluded by name rather than by dtype."""
    return [c for c in df.columns if c not in KEY_COLS]


def average_by_subject_activity(df: pd.DataFrame) -> pd.DataFrame:
    """
    Collapses the merged table to one row per (Subject.ID, Activity.Type),
    each measurement column replaced by its mean over the group's rows.
    Groups come out sorted by subject, then activity label.
    """
    feat_cols = measurement_columns(df)
    keys = list(KEY_COLS)

    out = (
        df.groupby(keys, sort=True, dropna=False)[feat_cols]
        .mean()
        .reset_index()
    )
    out = out[[SUBJECT_COL, ACTIVITY_COL] + feat_cols]

    log.info(
        "Aggregated %d rows into %d (subject, activity) groups over %d measurement columns",
        len(df),
        len(out),
        len(feat_cols),
    )
    return out
