"""Console entry point: serve the engine protocol on stdin/stdout."""

from __future__ import annotations

import logging
import sys

from .config import EngineConfig
from .ubi import run_loop

logger = logging.getLogger(__name__)


def main() -> None:
    config = EngineConfig.from_env()

    # stdout carries the protocol stream
    logging.basicConfig(
        level=config.log_level_value,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    logger.info("Starting %s %s", config.name, config.version_string)

    try:
        run_loop(sys.stdin, sys.stdout, config)
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
