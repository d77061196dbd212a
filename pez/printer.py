"""Module for writing XPath results as text."""
import io
import logging
from typing import Iterable, Optional, TextIO

from lxml import etree

from pez.evaluator import XPathResult, is_node_set, scalar_to_string

logger = logging.getLogger('pez')


def is_element(node) -> bool:
  # Comments and processing instructions are elements to lxml but have no string tag
  return etree.iselement(node) and isinstance(node.tag, str)


def is_attribute(node) -> bool:
  return isinstance(node, str) and getattr(node, "is_attribute", False)


def is_text(node) -> bool:
  return isinstance(node, str) and not getattr(node, "is_attribute", False)


def serialize_element(element: etree._Element) -> str:
  """Serialize an element and its subtree as indented markup without its tail."""
  markup = etree.tostring(element, encoding="unicode", pretty_print=True, with_tail=False)
  if markup.endswith("\n"):
    markup = markup[:-1]
  return markup


def print_xpath_nodes(nodes: Optional[Iterable], output: TextIO, attributes: bool = False) -> int:
  """
  Print a node-set, one node per entry, in result order.

  Text nodes are written verbatim. Elements are serialized with their whole
  subtree. Attribute values are only written when `attributes` is set; every
  other node kind is skipped.

  Args:
      nodes: The node-set, may be None or empty
      output: Stream to write to
      attributes: Whether to print attribute values

  Returns:
      Number of nodes written
  """
  if not nodes:
    return 0

  written = 0
  scratch = io.StringIO()

  for node in nodes:
    if is_element(node):
      scratch.write(serialize_element(node))
    elif is_text(node) or (attributes and is_attribute(node)):
      scratch.write(node)
    else:
      logger.debug(f"Skipping node of type {type(node).__name__}")
      continue

    scratch.write("\n")
    output.write(scratch.getvalue())
    scratch.seek(0)
    scratch.truncate()
    written += 1

  return written


def print_result(result: XPathResult, output: TextIO, attributes: bool = False) -> int:
  """
  Print any XPath result.

  Node-sets go through print_xpath_nodes; a scalar is written as its string
  value on one line.

  Returns:
      Number of lines or nodes written
  """
  if is_node_set(result):
    return print_xpath_nodes(result, output, attributes=attributes)

  output.write(scalar_to_string(result) + "\n")
  return 1
