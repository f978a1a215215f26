import logging
import sys


def setup_logging(debug: bool = False):
    # Get root logger of 'passmeter'
    logger = logging.getLogger("passmeter")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Check if handler already added
    for h in logger.handlers:
        if getattr(h, "_passmeter_handler", False):
            return

    # Records carry lengths and tiers only, never the candidate itself.
    handler = logging.StreamHandler(sys.stderr)
    handler._passmeter_handler = True
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
