#!/usr/bin/env python3
"""Basic usage example"""

import sys

from fieldlog import Level, LoggerBuilder
from fieldlog.hooks import WriterHook


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_level(Level.DEBUG)
        .with_text(colored=None)
        .with_hook(WriterHook(sys.stderr, levels=[Level.ERROR]))
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started")
    logger.with_field("user", "alice").info("login")
    logger.with_fields({"attempt": 3, "host": "db-1"}).warn("retrying")
    logger.errorf("request failed after %d ms", 1500)

    if logger.is_debug():
        logger.debugf("state = %r", {"queue": [1, 2, 3]})


if __name__ == "__main__":
    main()
