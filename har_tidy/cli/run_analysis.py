from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from har_tidy.data_processing.errors import TidyDataError
from har_tidy.data_processing.run_analysis import run_analysis
from har_tidy.utils.config import apply_overrides, load_config
from har_tidy.utils.logging import setup_logging

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Build the tidy per-(subject, activity) mean/std table from the UCI HAR dataset."
    )
    p.add_argument("--config", default=None, help="Path to YAML config (supports extends).")
    p.add_argument("--raw-dir", default=None, help="Dataset root holding features.txt, train/ and test/.")
    p.add_argument("--features", default=None, help="Feature catalog path (default: <raw-dir>/features.txt).")
    p.add_argument("--output", default=None, help="Tidy CSV output path.")
    p.add_argument("--log-level", default=None, help="Logging level (overrides config).")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config) if args.config else {}
    cfg = apply_overrides(
        cfg,
        {
            "datasets.uci_har.raw_dir": args.raw_dir,
            "datasets.uci_har.features_file": args.features,
            "output.tidy_dataset": args.output,
            "logging.level": args.log_level,
        },
    )

    setup_logging(level=cfg.get("logging", {}).get("level", "INFO"))

    try:
        result = run_analysis(cfg)
    except (TidyDataError, FileNotFoundError) as e:
        log.error("Analysis failed: %s", e)
        return 1

    log.info("Done: %s", result["tidy_path"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
