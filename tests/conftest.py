import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path so tests can import local modules
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FEATURE_NAMES = [
    "tBodyAcc-mean()-X",
    "tBodyAcc-std()-X",
    "tBodyAcc-mad()-X",
    "fBodyGyro-meanFreq()-X",
    "fBodyGyro-std()-X",
    "tGravityAcc-mean()-Y",
]

TRAIN = (
    [1, 1, 1, 3],
    [1, 1, 4, 1],
    [
        [0.1, 0.2, 9.0, 9.0, 0.5, 1.0],
        [0.3, 0.4, 9.0, 9.0, 0.7, 1.0],
        [0.9, 0.1, 9.0, 9.0, 0.2, 2.0],
        [0.5, 0.5, 9.0, 9.0, 0.5, 0.5],
    ],
)

TEST = (
    [2, 2, 1],
    [6, 6, 1],
    [
        [-0.2, 0.0, 9.0, 9.0, 0.1, 0.3],
        [-0.4, 0.2, 9.0, 9.0, 0.3, 0.5],
        [0.5, 0.3, 9.0, 9.0, 0.6, 1.0],
    ],
)


def write_lines(path: Path, lines):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def write_features(root: Path, names):
    return write_lines(root / "features.txt", [f"{i} {n}" for i, n in enumerate(names, start=1)])


def write_partition(root: Path, name: str, subjects, codes, rows):
    base = root / name
    write_lines(base / f"subject_{name}.txt", [str(s) for s in subjects])
    write_lines(base / f"y_{name}.txt", [str(c) for c in codes])
    # UCI files pad every value with a leading space
    write_lines(base / f"X_{name}.txt", [" ".join(f" {v:.7e}" for v in row) for row in rows])


@pytest.fixture
def make_dataset(tmp_path):
    def _make(feature_names, train, test, root_name="UCI HAR Dataset"):
        root = tmp_path / root_name
        write_features(root, feature_names)
        write_partition(root, "train", *train)
        write_partition(root, "test", *test)
        return root

    return _make


@pytest.fixture
def har_dir(make_dataset):
    return make_dataset(FEATURE_NAMES, TRAIN, TEST)
