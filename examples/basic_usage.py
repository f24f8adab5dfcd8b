#!/usr/bin/env python3
"""Basic usage example"""

from functools import partial

from pathlogger import PRINTFN, LoggerBuilder, LogLevel, append_path, indent, logf, pipe


def main():
    # Chain combinators by hand
    logger = pipe(PRINTFN, partial(append_path, "app"))
    logf(LogLevel.INFO, logger, "Application started")

    db = pipe(logger, partial(append_path, "db"), indent)
    db.debug("connecting to %s:%d", "localhost", 5432)
    db.warn("slow query took %.1fs", 2.5)

    # Or use the builder
    worker = (LoggerBuilder()
        .with_path("worker")
        .with_console(colored=True)
        .build())
    worker.error("job %s failed", "nightly-report")
    worker.fatal("giving up")


if __name__ == "__main__":
    main()
