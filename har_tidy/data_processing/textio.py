from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Tuple, Union

from har_tidy.data_processing.errors import ParseError


def iter_data_lines(path: Union[str, Path], skip_comments: bool = True) -> Iterator[Tuple[int, List[str]]]:
    """
    Yields (line_number, tokens) for every non-blank line of a whitespace
    separated text file. Lines starting with '#' are dropped when
    skip_comments is set. Line numbers are 1-based and count every physical line.

    Callers wrap the generator in contextlib.closing() so the file is released
    as soon as they stop iterating, including when they raise.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        lineno = 0
        try:
            for lineno, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                if skip_comments and line.startswith("#"):
                    continue
                yield lineno, line.split()
        except UnicodeDecodeError as e:
            raise ParseError(f"{path}: not valid UTF-8 after line {lineno} ({e.reason})") from e
