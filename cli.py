import logging
import sys

import scenes
from logconfig import setup_logging

logger = logging.getLogger(__name__)

WIDTH = scenes.WIDTH
HEIGHT = scenes.HEIGHT
OUTPUT_PATH = "out.ppm"


def main():
    """Render the full scene (shadows, mirrors and glass) to OUTPUT_PATH, overwriting it."""
    setup_logging()
    example = scenes.RefractionExample(WIDTH, HEIGHT)
    try:
        example.render(OUTPUT_PATH)
    except OSError:
        logger.exception("could not write %s", OUTPUT_PATH)
        sys.exit(1)


if __name__ == '__main__':
    main()
