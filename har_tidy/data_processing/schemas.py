from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple, Union

SUBJECT_COL = "Subject.ID"
ACTIVITY_COL = "Activity.Type"
KEY_COLS = (SUBJECT_COL, ACTIVITY_COL)

PARTITIONS: Tuple[str, str] = ("train", "test")

# UCI HAR activity_labels.txt
ACTIVITY_LABELS: Dict[int, str] = {
    1: "WALKING",
    2: "WALKING_UPSTAIRS",
    3: "WALKING_DOWNSTAIRS",
    4: "SITTING",
    5: "STANDING",
    6: "LAYING",
}


@dataclass(frozen=True)
class FeatureEntry:
    position: int
    raw_name: str


@dataclass(frozen=True)
class PartitionFiles:
    name: str
    subject_file: Path
    activity_file: Path
    measurement_file: Path

    @classmethod
    def for_partition(cls, root: Union[str, Path], name: str) -> "PartitionFiles":
        """
        Standard UCI HAR layout:
          <root>/<name>/subject_<name>.txt
          <root>/<name>/y_<name>.txt
          <root>/<name>/X_<name>.txt
        """
        base = Path(root) / name
        return cls(
            name=name,
            subject_file=base / f"subject_{name}.txt",
            activity_file=base / f"y_{name}.txt",
            measurement_file=base / f"X_{name}.txt",
        )
