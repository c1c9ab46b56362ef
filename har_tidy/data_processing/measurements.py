from __future__ import annotations

import logging
from contextlib import closing
from pathlib import Path
from typing import List, Union

import numpy as np
import pandas as pd

from har_tidy.data_processing.errors import ParseError, SchemaMismatchError
from har_tidy.data_processing.features import FeatureIndex
from har_tidy.data_processing.textio import iter_data_lines

log = logging.getLogger(__name__)


def _read_matrix(path: Path, n_cols: int) -> np.ndarray:
    rows: List[List[float]] = []
    with closing(iter_data_lines(path)) as lines:
        for lineno, tokens in lines:
            if len(tokens) != n_cols:
                raise SchemaMismatchError(
                    f"{path}:{lineno}: expected {n_cols} values (one per feature), got {len(tokens)}"
                )
            try:
                rows.append([float(t) for t in tokens])
            except ValueError as e:
                raise ParseError(f"{path}:{lineno}: non-numeric measurement value ({e})") from None

    if not rows:
        return np.empty((0, n_cols), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)


def load_measurements(path: Union[str, Path], index: FeatureIndex) -> pd.DataFrame:
    """
    Reads a whitespace separated X_<partition>.txt matrix, labels its columns
    with the raw feature names and keeps only the mean()/std() columns.
    """
    path = Path(path)
    matrix = _read_matrix(path, len(index))

    # catalog names can repeat (the bandsEnergy block), so project by position
    raw = pd.DataFrame(matrix, columns=index.names)
    df = raw.iloc[:, index.mean_std_columns].copy()
    df = df.reset_index(drop=True)

    log.info("Loaded measurements %s: rows=%d cols=%d/%d", path.name, len(df), df.shape[1], len(index))
    return df
