from __future__ import annotations

import logging

import pandas as pd

from har_tidy.data_processing.errors import SchemaMismatchError

log = logging.getLogger(__name__)


def merge_partitions(first: pd.DataFrame, second: pd.DataFrame) -> pd.DataFrame:
    """Row-wise union: first's rows then second's rows, duplicates retained."""
    cols_a = list(first.columns)
    cols_b = list(second.columns)
    if cols_a != cols_b:
        only_a = [c for c in cols_a if c not in cols_b]
        only_b = [c for c in cols_b if c not in cols_a]
        raise SchemaMismatchError(
            "Cannot merge partitions with different schemas "
            f"(n_cols={len(cols_a)} vs {len(cols_b)}, only in first={only_a[:5]}, only in second={only_b[:5]})"
        )

    merged = pd.concat([first, second], ignore_index=True)
    log.info("Merged partitions: %d + %d = %d rows", len(first), len(second), len(merged))
    return merged
