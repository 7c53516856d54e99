import logging
import os

DECODE_LOG_LEVEL_NAME = os.getenv("UNSPLASH_DECODE_LOG_LEVEL", "DEBUG").upper()
DECODE_LOG_LEVEL = logging.getLevelName(DECODE_LOG_LEVEL_NAME)

# Unknown level names come back as the string "Level X"
if not isinstance(DECODE_LOG_LEVEL, int):
    DECODE_LOG_LEVEL = logging.DEBUG
