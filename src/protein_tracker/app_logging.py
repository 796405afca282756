"""Logging configuration helpers.

Modules log through `logging.getLogger(__name__)` under the `protein_tracker`
namespace and never install handlers themselves. The embedding application
calls `configure_logging` once at startup, before `ensure_schema`.
"""

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Attach one stream handler to the `protein_tracker` logger."""
    logger = logging.getLogger("protein_tracker")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
