from __future__ import annotations

import logging


def setup_logging(level: str | int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] [datastream] %(message)s",
    )
