from __future__ import annotations

import logging
import re
from contextlib import closing
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple, Union

from har_tidy.data_processing.errors import ParseError
from har_tidy.data_processing.schemas import FeatureEntry
from har_tidy.data_processing.textio import iter_data_lines

log = logging.getLogger(__name__)


# Matches tBodyAcc-mean()-X, fBodyGyro-std(), ... but not meanFreq() or angle(...Mean)
MEAN_STD_PATTERN = re.compile(r"mean\(\)|std\(\)")


def select_mean_std(entries: Iterable[FeatureEntry]) -> FrozenSet[int]:
    return frozenset(e.position for e in entries if MEAN_STD_PATTERN.search(e.raw_name))


@dataclass(frozen=True)
class FeatureIndex:
    entries: Tuple[FeatureEntry, ...]
    mean_std_positions: FrozenSet[int]

    @classmethod
    def from_entries(cls, entries: Iterable[FeatureEntry]) -> "FeatureIndex":
        entries = tuple(entries)
        positions = sorted(e.position for e in entries)
        if positions != list(range(1, len(entries) + 1)):
            raise ParseError(f"Feature positions must be unique and cover 1..{len(entries)}; got {positions[:10]}")
        return cls(entries=entries, mean_std_positions=select_mean_std(entries))

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def names(self) -> List[str]:
        """Raw feature names in column (position) order."""
        return [e.raw_name for e in sorted(self.entries, key=lambda e: e.position)]

    @property
    def mean_std_columns(self) -> List[int]:
        """0-based column offsets of the mean/std features, in original order."""
        return [p - 1 for p in sorted(self.mean_std_positions)]

    @property
    def mean_std_names(self) -> List[str]:
        names = self.names
        return [names[i] for i in self.mean_std_columns]


def load_feature_index(path: Union[str, Path]) -> FeatureIndex:
    """
    Parses features.txt: one "<position> <name>" declaration per line.
    Comment lines ('#') and blank lines are skipped.
    """
    path = Path(path)
    entries: List[FeatureEntry] = []
    with closing(iter_data_lines(path)) as lines:
        for lineno, tokens in lines:
            if len(tokens) != 2:
                raise ParseError(f"{path}:{lineno}: expected '<position> <name>', got {len(tokens)} tokens")
            try:
                position = int(tokens[0])
            except ValueError:
                raise ParseError(f"{path}:{lineno}: feature position is not an integer: {tokens[0]!r}") from None
            entries.append(FeatureEntry(position=position, raw_name=tokens[1]))

    index = FeatureIndex.from_entries(entries)
    log.info(
        "Loaded feature catalog %s: n_features=%d mean_std=%d",
        path.name,
        len(index),
        len(index.mean_std_positions),
    )
    return index
