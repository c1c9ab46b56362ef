from __future__ import annotations

import logging
from contextlib import closing
from pathlib import Path
from typing import Iterable, List, Union

import pandas as pd

from har_tidy.data_processing.errors import ParseError, RowCountMismatchError, UnknownActivityCodeError
from har_tidy.data_processing.features import FeatureIndex
from har_tidy.data_processing.measurements import load_measurements
from har_tidy.data_processing.schemas import ACTIVITY_COL, ACTIVITY_LABELS, SUBJECT_COL, PartitionFiles
from har_tidy.data_processing.textio import iter_data_lines

log = logging.getLogger(__name__)


def read_int_column(path: Union[str, Path]) -> List[int]:
    """One integer per line, line order preserved."""
    path = Path(path)
    values: List[int] = []
    with closing(iter_data_lines(path, skip_comments=False)) as lines:
        for lineno, tokens in lines:
            if len(tokens) != 1:
                raise ParseError(f"{path}:{lineno}: expected a single integer, got {len(tokens)} tokens")
            try:
                values.append(int(tokens[0]))
            except ValueError:
                raise ParseError(f"{path}:{lineno}: not an integer: {tokens[0]!r}") from None
    return values


INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


def _subject_series(subjects: List[int]) -> pd.Series:
    """int64 when every ID fits, otherwise Python ints in an object column."""
    if all(INT64_MIN <= s <= INT64_MAX for s in subjects):
        return pd.Series(subjects, dtype="int64")
    return pd.Series(subjects, dtype="object")


def translate_activity_codes(codes: Iterable[int]) -> List[str]:
    labels: List[str] = []
    for i, code in enumerate(codes):
        label = ACTIVITY_LABELS.get(code)
        if label is None:
            raise UnknownActivityCodeError(f"Unknown activity code {code} at row {i + 1} (expected 1..6)")
        labels.append(label)
    return labels


def load_partition(files: PartitionFiles, index: FeatureIndex) -> pd.DataFrame:
    """
    Builds one partition table: Subject.ID, Activity.Type, then the filtered
    measurement columns. Rows of the three files are matched by line position.
    """
    subjects = read_int_column(files.subject_file)
    activities = translate_activity_codes(read_int_column(files.activity_file))
    measurements = load_measurements(files.measurement_file, index)

    counts = (len(subjects), len(activities), len(measurements))
    if len(set(counts)) != 1:
        raise RowCountMismatchError(
            f"Partition '{files.name}' is malformed: subjects={counts[0]} "
            f"activities={counts[1]} measurements={counts[2]} rows"
        )

    keys = pd.DataFrame(
        {
            SUBJECT_COL: _subject_series(subjects),
            ACTIVITY_COL: pd.Series(activities, dtype="object"),
        }
    )
    df = pd.concat([keys, measurements], axis=1)

    log.info(
        "Loaded partition %s: n=%d subjects=%d activities=%d",
        files.name,
        len(df),
        df[SUBJECT_COL].nunique(),
        df[ACTIVITY_COL].nunique(),
    )
    return df
