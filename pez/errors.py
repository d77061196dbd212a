"""Exceptions raised by the pez pipeline."""


class PezError(Exception):
  """Base class for every failure that terminates a run."""


class ArgumentError(PezError):
  """Missing or malformed command-line input."""


class SourceUnavailable(PezError):
  """The target is not a file and could not be fetched as a URL."""

  def __init__(self, url: str):
    self.url = url
    super().__init__(f'failed to fetch URL "{url}"')


class ParseError(PezError):
  """The input bytes did not yield a document tree."""

  def __init__(self, label: str):
    self.label = label
    super().__init__(f'unable to parse input "{label}"')


class NamespaceFormatError(PezError):
  """The namespace declaration list is malformed."""

  def __init__(self, ns_list: str):
    self.ns_list = ns_list
    super().__init__(f'failed to register namespaces list "{ns_list}"')


class EvaluationError(PezError):
  """The XPath expression could not be compiled or evaluated."""

  def __init__(self, expression: str):
    self.expression = expression
    super().__init__(f'unable to evaluate XPath expression "{expression}"')
