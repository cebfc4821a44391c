"""Robot Framework acceptance test runner."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
