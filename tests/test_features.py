from pathlib import Path

import pytest

from har_tidy.data_processing.errors import ParseError
from har_tidy.data_processing.features import FeatureIndex, load_feature_index, select_mean_std
from har_tidy.data_processing.schemas import FeatureEntry

from conftest import FEATURE_NAMES, write_features, write_lines


def test_load_feature_index_keeps_file_order(tmp_path: Path):
    path = write_features(tmp_path, FEATURE_NAMES)
    index = load_feature_index(path)

    assert len(index) == 6
    assert index.entries[0] == FeatureEntry(position=1, raw_name="tBodyAcc-mean()-X")
    assert index.names == FEATURE_NAMES


def test_mean_std_filter_excludes_mean_freq_and_others(tmp_path: Path):
    index = load_feature_index(write_features(tmp_path, FEATURE_NAMES))

    assert index.mean_std_positions == frozenset({1, 2, 5, 6})
    assert index.mean_std_columns == [0, 1, 4, 5]
    assert index.mean_std_names == [
        "tBodyAcc-mean()-X",
        "tBodyAcc-std()-X",
        "fBodyGyro-std()-X",
        "tGravityAcc-mean()-Y",
    ]


def test_filter_matches_substring_anywhere():
    entries = [
        FeatureEntry(1, "fBodyBodyGyroMag-mean()"),
        FeatureEntry(2, "angle(tBodyAccMean,gravity)"),
        FeatureEntry(3, "tBodyGyroJerk-std()-Z"),
        FeatureEntry(4, "fBodyAccMag-meanFreq()"),
    ]
    assert select_mean_std(entries) == frozenset({1, 3})


def test_filtering_is_idempotent(tmp_path: Path):
    index = load_feature_index(write_features(tmp_path, FEATURE_NAMES))

    assert select_mean_std(index.entries) == select_mean_std(index.entries)
    assert FeatureIndex.from_entries(index.entries).mean_std_positions == index.mean_std_positions


def test_comment_and_blank_lines_are_skipped(tmp_path: Path):
    path = write_lines(
        tmp_path / "features.txt",
        ["# catalog", "1 tBodyAcc-mean()-X", "", "   # indented comment", "2 tBodyAcc-mad()-X"],
    )
    index = load_feature_index(path)
    assert index.names == ["tBodyAcc-mean()-X", "tBodyAcc-mad()-X"]
    assert index.mean_std_positions == frozenset({1})


@pytest.mark.parametrize(
    "bad_line",
    ["1 tBodyAcc-mean()-X extra", "tBodyAcc-mean()-X", "one tBodyAcc-mean()-X", "1.5 tBodyAcc-mean()-X"],
)
def test_malformed_line_raises_parse_error(tmp_path: Path, bad_line):
    path = write_lines(tmp_path / "features.txt", ["1 tBodyAcc-std()-X", bad_line])
    with pytest.raises(ParseError, match=":2:"):
        load_feature_index(path)


def test_positions_must_be_dense(tmp_path: Path):
    path = write_lines(tmp_path / "features.txt", ["1 a-mean()", "3 b-std()"])
    with pytest.raises(ParseError):
        load_feature_index(path)


def test_missing_catalog(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_feature_index(tmp_path / "nope.txt")
