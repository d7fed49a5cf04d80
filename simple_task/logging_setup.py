import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure the ``simple_task`` logger with a single stderr handler.

    Streamlit reruns the app script on every interaction, so this replaces any
    handler a previous call installed instead of stacking a new one.
    """
    logger = logging.getLogger("simple_task")
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
