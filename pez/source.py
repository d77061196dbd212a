"""Module for resolving input targets and fetching remote documents."""
import enum
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import requests

from pez.config import CHUNK_SIZE, REQUEST_TIMEOUT, STDIN_LABEL, USER_AGENT
from pez.errors import SourceUnavailable

logger = logging.getLogger('pez')

STDIN_MARKER = "-"


class SourceKind(enum.Enum):
  """Where the document bytes come from."""
  STDIN = "stdin"
  PATH = "path"
  URL = "url"


@dataclass(frozen=True)
class Target:
  """The input named on the command line, resolved to exactly one source kind."""
  value: Optional[str]
  kind: SourceKind

  @classmethod
  def parse(cls, value: Optional[str]) -> "Target":
    """
    Resolve a target string.

    Resolution order is fixed: absent or "-" means standard input, then an
    existing filesystem path, and anything else is treated as a URL.

    Args:
        value: The positional source argument, or None when it was omitted

    Returns:
        The resolved Target
    """
    if value is None or value == STDIN_MARKER:
      return cls(value=None, kind=SourceKind.STDIN)
    if os.path.exists(value):
      return cls(value=value, kind=SourceKind.PATH)
    return cls(value=value, kind=SourceKind.URL)

  @property
  def label(self) -> str:
    """Name used for the target in error messages."""
    return self.value if self.value is not None else STDIN_LABEL


@dataclass
class DocumentBuffer:
  """Growable byte buffer that receives a response body chunk by chunk."""
  data: bytearray = field(default_factory=bytearray)

  @property
  def size(self) -> int:
    return len(self.data)

  def append(self, chunk: bytes) -> int:
    self.data.extend(chunk)
    return len(chunk)

  def clear(self) -> None:
    self.data.clear()

  def __enter__(self) -> "DocumentBuffer":
    return self

  def __exit__(self, exc_type, exc, tb) -> None:
    self.clear()


def fetch_url(url: str, buffer: DocumentBuffer,
              timeout: float = REQUEST_TIMEOUT,
              chunk_size: int = CHUNK_SIZE) -> DocumentBuffer:
  """
  Fetch a URL and stream its body into a buffer.

  Args:
      url: The URL to fetch
      buffer: Buffer that receives the response body
      timeout: Connect and read timeout in seconds
      chunk_size: Size of the chunks read from the response

  Returns:
      The filled buffer

  Raises:
      SourceUnavailable: If the transfer fails or the server does not
          answer with a success status. The buffer is emptied first.
  """
  logger.info(f"Fetching page: {url}")

  try:
    with requests.Session() as session:
      with session.get(url, headers={"User-Agent": USER_AGENT},
                       timeout=timeout, stream=True) as response:
        response.raise_for_status()
        for chunk in response.iter_content(chunk_size=chunk_size):
          buffer.append(chunk)
  except requests.RequestException as e:
    logger.debug(f"Error fetching page {url}: {e}")
    buffer.clear()
    raise SourceUnavailable(url) from e

  logger.info(f"Fetched {buffer.size} bytes from {url}")
  return buffer
