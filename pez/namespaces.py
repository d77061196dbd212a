"""Module for parsing and registering namespace declaration lists."""
import logging
from typing import List

from pydantic import BaseModel, ValidationError, field_validator

from pez.errors import NamespaceFormatError

logger = logging.getLogger('pez')


class NamespaceDeclaration(BaseModel):
  """A single prefix=href pair from a namespace list."""

  prefix: str
  href: str = ""

  @field_validator("prefix")
  @classmethod
  def validate_prefix(cls, v: str) -> str:
    """Reject prefixes XPath cannot bind."""
    if not v:
      raise ValueError("empty namespace prefix")
    if " " in v or ":" in v:
      raise ValueError(f"invalid namespace prefix: {v!r}")
    return v


def parse_namespace_list(ns_list: str) -> List[NamespaceDeclaration]:
  """
  Parse a namespace list in "prefix1=href1 prefix2=href2 ..." format.

  Runs of spaces are skipped. Every token must contain "=", the prefix is
  what comes before the first "=" and the href is the rest of the token,
  which may be empty.

  Args:
      ns_list: The raw list from the command line

  Returns:
      Declarations in the order they appear

  Raises:
      NamespaceFormatError: If any token is malformed
  """
  declarations = []

  for token in ns_list.split(" "):
    if not token:
      continue

    prefix, sep, href = token.partition("=")
    if not sep:
      logger.debug(f"Namespace declaration without '=': {token!r}")
      raise NamespaceFormatError(ns_list)

    try:
      declarations.append(NamespaceDeclaration(prefix=prefix, href=href))
    except ValidationError as e:
      logger.debug(f"Invalid namespace declaration {token!r}: {e}")
      raise NamespaceFormatError(ns_list) from e

  return declarations


def register_namespaces(context, ns_list: str) -> int:
  """
  Register every pair of a namespace list in an evaluation context.

  The whole list is validated before anything is registered, so a malformed
  list leaves the context untouched. A repeated prefix overwrites the earlier
  one.

  Args:
      context: The EvaluationContext to register into
      ns_list: The raw list from the command line

  Returns:
      Number of declarations registered
  """
  declarations = parse_namespace_list(ns_list)

  for declaration in declarations:
    logger.debug(f"Registering namespace {declaration.prefix}={declaration.href}")
    context.register_namespace(declaration.prefix, declaration.href)

  return len(declarations)
