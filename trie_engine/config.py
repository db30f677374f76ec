import os
import logging

# Alphabet
ALPHABET_SIZE = 26
ROOT_SENTINEL = " "

# Logging
LOGGER_NAME = "trie-engine"
LOG_LEVEL = os.getenv("TRIE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure root logging the way the engine's entry points expect and return the engine logger"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    return logging.getLogger(LOGGER_NAME)
