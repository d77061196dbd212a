"""pez - Evaluate XPath expressions against HTML files, URLs or standard input."""

__version__ = "1.0.0"

from pez.errors import (
    PezError,
    ArgumentError,
    SourceUnavailable,
    ParseError,
    NamespaceFormatError,
    EvaluationError,
)
from pez.pipeline import execute_xpath_expression

__all__ = [
    "execute_xpath_expression",
    "PezError",
    "ArgumentError",
    "SourceUnavailable",
    "ParseError",
    "NamespaceFormatError",
    "EvaluationError",
]
