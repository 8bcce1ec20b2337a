"""
EE Toolbox - Configuration
"""

import logging

# Result log (append-only, relative to the working directory)
LOG_FILENAME = "calc_log.txt"

# Diagnostic logging (stderr, never mixed into the prompt stream)
LOG_LEVEL  = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Input limits
MAX_RESISTORS = 10   # series/parallel calculator
MAX_SAMPLES   = 100  # signal sample tables
