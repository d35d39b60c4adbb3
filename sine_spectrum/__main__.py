import logging
import sys

from sine_spectrum.exceptions import SineSpectrumError
from sine_spectrum.logging_config import setup_logging
from sine_spectrum.pipeline import run

logger = logging.getLogger("sine_spectrum")


def main() -> None:
    setup_logging(level=logging.WARNING)
    try:
        run()
    except SineSpectrumError as err:
        logger.error("%s failed: %s", err.stage, err)
        sys.exit(1)


if __name__ == "__main__":
    main()
