"""Driver for code-generation comparison runs."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
