"""Configuration settings for pez."""
import logging
import math
import os
from typing import Callable, TypeVar

from dotenv import load_dotenv

logger = logging.getLogger('pez.config')

N = TypeVar('N', int, float)

# Load environment variables from .env file if present
load_dotenv()


def env_number(name: str, default: N, cast: Callable[[str], N]) -> N:
  """
  Read a positive number from the environment.

  Args:
      name: Environment variable name
      default: Value used when the variable is unset or invalid
      cast: Conversion applied to the raw string (int or float)

  Returns:
      The configured value, or the default if the variable is not a
      positive number
  """
  raw = os.getenv(name)
  if raw is None or not raw.strip():
    return default

  try:
    value = cast(raw.strip())
  except ValueError:
    logger.warning(f"Ignoring {name}={raw!r}: not a number, using {default}")
    return default

  if not math.isfinite(value) or value <= 0:
    logger.warning(f"Ignoring {name}={raw!r}: must be positive, using {default}")
    return default
  return value


# HTTP settings
USER_AGENT = os.getenv("PEZ_USER_AGENT") or "pez/1.0"
REQUEST_TIMEOUT = env_number("PEZ_TIMEOUT", 30.0, float)
CHUNK_SIZE = env_number("PEZ_CHUNK_SIZE", 8192, int)

# Label used in diagnostics when the document comes from standard input
STDIN_LABEL = "stdin"

# Logging settings
LOG_FORMAT = '[%(asctime)s] [%(levelname)s]: %(message)s'
DATE_FORMAT = '%H:%M:%S'

USAGE_TEMPLATE = """\
usage: {prog} [-N <known-ns-list>] <xpath-expr> [<html-file-or-url>]
where <known-ns-list> is a list of known namespaces
in "<prefix1>=<href1> <prefix2>=<href2> ..." format
If <html-file-or-url> is not provided, the tool reads from stdin.
"""
