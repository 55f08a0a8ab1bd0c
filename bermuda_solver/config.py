# config.py
import os

# ======= Search =======
ROWS          = int(os.getenv("BERMUDA_ROWS", "4"))
# 0 or less means enumerate every solution
MAX_SOLUTIONS = int(os.getenv("BERMUDA_MAX_SOLUTIONS", "0"))

# ======= Logging =======
LOG_LEVEL  = os.getenv("BERMUDA_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# ======= Output names =======
SVG_OUT = os.getenv("BERMUDA_SVG_OUT", "solution.svg")


class CFG:
    ROWS          = ROWS
    MAX_SOLUTIONS = MAX_SOLUTIONS

    LOG_LEVEL   = LOG_LEVEL
    LOG_FORMAT  = LOG_FORMAT
    LOG_DATEFMT = LOG_DATEFMT

    SVG_OUT = SVG_OUT


def solution_cap(value: int | None = None) -> int | None:
    """Resolve a solution cap: explicit value first, then configuration.

    Returns None for "no cap".
    """
    cap = CFG.MAX_SOLUTIONS if value is None else value
    return cap if cap > 0 else None


__all__ = ["CFG", "solution_cap"]
