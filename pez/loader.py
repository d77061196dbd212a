"""
HTML loading for pez.

Every entry point parses with the same lenient lxml HTML parser: blank text
nodes are dropped, malformed markup is repaired and nothing referenced by the
document is fetched over the network. Recoverable parser errors are only
logged at debug level.
"""

import io
import logging
import sys
from typing import BinaryIO, Optional, Union

from lxml import etree

from pez.config import STDIN_LABEL
from pez.errors import ParseError
from pez.source import DocumentBuffer, SourceKind, Target, fetch_url

logger = logging.getLogger('pez')


def make_parser() -> etree.HTMLParser:
  """Create the HTML parser with the fixed pez options."""
  return etree.HTMLParser(remove_blank_text=True, recover=True, no_network=True)


def _parse(source: Union[str, BinaryIO], label: str, base_url: Optional[str] = None) -> etree._ElementTree:
  parser = make_parser()
  try:
    tree = etree.parse(source, parser, base_url=base_url)
  except (etree.LxmlError, OSError, ValueError) as e:
    logger.debug(f"Error parsing {label}: {e}")
    raise ParseError(label) from e
  finally:
    for entry in parser.error_log:
      logger.debug(f"{label}:{entry.line}:{entry.column}: {entry.message}")

  if tree is None or tree.getroot() is None:
    raise ParseError(label)
  return tree


def load_stream(stream: BinaryIO, label: str = STDIN_LABEL) -> etree._ElementTree:
  """
  Parse an open binary stream, reading it to the end.

  Args:
      stream: Binary stream such as sys.stdin.buffer
      label: Name of the stream for diagnostics

  Returns:
      The parsed document tree

  Raises:
      ParseError: If no tree could be built
  """
  return _parse(stream, label)


def load_path(path: str) -> etree._ElementTree:
  """Parse a file through lxml's own file reader."""
  return _parse(path, path)


def load_memory(data: Union[bytes, bytearray], label: str) -> etree._ElementTree:
  """
  Parse an in-memory document.

  Args:
      data: The raw document bytes
      label: Where the bytes came from, used for diagnostics and as base URL

  Returns:
      The parsed document tree

  Raises:
      ParseError: If no tree could be built (e.g. zero bytes)
  """
  if not data:
    raise ParseError(label)
  return _parse(io.BytesIO(data), label, base_url=label)


def load_target(target: Target, stdin: Optional[BinaryIO] = None) -> etree._ElementTree:
  """
  Acquire and parse the document named by a target.

  Args:
      target: The resolved input target
      stdin: Stream to read when the target is standard input
          (defaults to sys.stdin.buffer)

  Returns:
      The parsed document tree
  """
  if target.kind is SourceKind.STDIN:
    return load_stream(stdin if stdin is not None else sys.stdin.buffer)

  if target.kind is SourceKind.PATH:
    return load_path(target.value)

  with DocumentBuffer() as buffer:
    fetch_url(target.value, buffer)
    return load_memory(buffer.data, target.value)
