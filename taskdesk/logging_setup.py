import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure console logging for the service.

    Call this ONCE, before the server starts. Repeated calls replace the
    handler instead of stacking duplicates.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(ch)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
