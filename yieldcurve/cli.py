"""Console entry point: print the linear vs. cubic spline zero rate table."""

import logging
import sys
from typing import Optional

from yieldcurve.analysis import run_demo
from yieldcurve.config import DemoConfig
from yieldcurve.errors import CurveError, UnknownError

logger = logging.getLogger(__name__)


def main(config: Optional[DemoConfig] = None) -> int:
    """Run the comparison; return the process exit code."""
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        output = run_demo(config)
    except CurveError as exc:
        logger.debug("Curve comparison failed", exc_info=True)
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        error = UnknownError(f"{type(exc).__name__}: {exc}")
        logger.debug("Unexpected failure during curve comparison", exc_info=True)
        print(f"An unknown error occurred: {error}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
