import logging
import sys


def setup_logging(level=logging.INFO):
  "Send log records for the package to stderr."

  logger = logging.getLogger("efiboot")
  logger.setLevel(level)

  for handler in list(logger.handlers):
    logger.removeHandler(handler)

  handler = logging.StreamHandler(stream=sys.stderr)
  handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
  logger.addHandler(handler)

  return logger
