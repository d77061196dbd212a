"""Module tying acquisition, parsing, evaluation and printing together."""
import logging
import sys
from typing import BinaryIO, Optional, TextIO

from pez.evaluator import EvaluationContext
from pez.loader import load_target
from pez.namespaces import register_namespaces
from pez.printer import print_result
from pez.source import Target

logger = logging.getLogger('pez')


def execute_xpath_expression(
    source: Optional[str],
    xpath_expr: str,
    ns_list: Optional[str] = None,
    output: Optional[TextIO] = None,
    stdin: Optional[BinaryIO] = None,
    attributes: bool = False
) -> int:
  """
  Evaluate an XPath expression against an HTML document and print the result.

  Args:
      source: File path or URL, or None/"-" for standard input
      xpath_expr: The XPath expression to evaluate
      ns_list: Optional namespace list in "prefix=href ..." format
      output: Stream the result is written to (defaults to sys.stdout)
      stdin: Stream read when the source is standard input
      attributes: Whether attribute values are printed

  Returns:
      Number of nodes or values printed

  Raises:
      PezError: On any failure. Nothing has been written to output then.
  """
  target = Target.parse(source)
  logger.info(f"Reading {target.kind.value} input: {target.label}")

  # Step 1: Acquire and parse the document
  document = load_target(target, stdin=stdin)

  # Step 2: Bind namespaces
  context = EvaluationContext(document)
  if ns_list is not None:
    count = register_namespaces(context, ns_list)
    logger.info(f"Registered {count} namespaces")

  # Step 3: Evaluate, then print while the tree is alive
  result = context.evaluate(xpath_expr)
  return print_result(result, output if output is not None else sys.stdout, attributes=attributes)
