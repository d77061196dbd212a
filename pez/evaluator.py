"""Module for evaluating XPath expressions against a parsed document."""
import logging
import math
from decimal import Decimal
from typing import Dict, List, Union

from lxml import etree

from pez.errors import EvaluationError

logger = logging.getLogger('pez')

XPathResult = Union[List, bool, float, str]


class EvaluationContext:
  """Binds a document tree to the namespaces its expressions may use."""

  def __init__(self, document: etree._ElementTree):
    """
    Initialize the context.

    Args:
        document: The tree expressions are evaluated against
    """
    self.document = document
    self.namespaces: Dict[str, str] = {}

  def register_namespace(self, prefix: str, uri: str) -> None:
    """Bind a prefix, replacing any earlier binding of the same prefix."""
    self.namespaces[prefix] = uri

  def _make_evaluator(self) -> etree.XPathDocumentEvaluator:
    bound = {prefix: uri for prefix, uri in self.namespaces.items() if uri}
    evaluator = etree.XPathDocumentEvaluator(self.document, namespaces=bound)

    # lxml refuses empty URIs in the constructor; bind them one by one
    for prefix, uri in self.namespaces.items():
      if uri:
        continue
      try:
        evaluator.register_namespace(prefix, uri)
      except (TypeError, ValueError) as e:
        logger.debug(f"Namespace prefix {prefix!r} left unbound: {e}")
    return evaluator

  def evaluate(self, expression: str) -> XPathResult:
    """
    Compile and evaluate an XPath 1.0 expression.

    Args:
        expression: The XPath expression

    Returns:
        A list of nodes in document order, or a bool, float or str for
        scalar expressions

    Raises:
        EvaluationError: If the expression does not compile or fails to run
    """
    try:
      evaluator = self._make_evaluator()
      result = evaluator(expression)
    except (etree.XPathError, TypeError, ValueError) as e:
      logger.debug(f"Error evaluating {expression!r}: {e}")
      raise EvaluationError(expression) from e

    if isinstance(result, list):
      logger.info(f"Expression matched {len(result)} nodes")
    return result


def is_node_set(result: XPathResult) -> bool:
  return isinstance(result, list)


def scalar_to_string(value: Union[bool, float, str]) -> str:
  """
  Convert a scalar XPath result to its XPath string value.

  Args:
      value: A boolean, number or string result

  Returns:
      "true"/"false" for booleans, numbers the way XPath's string() renders
      them, strings unchanged
  """
  if isinstance(value, bool):
    return "true" if value else "false"

  if isinstance(value, float):
    if math.isnan(value):
      return "NaN"
    if math.isinf(value):
      return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
      return str(int(value))
    text = repr(value)
    # XPath never uses exponent notation
    if "e" in text:
      text = format(Decimal(text), "f")
    return text

  return str(value)
