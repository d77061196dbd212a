"""Command-line interface for evaluating XPath expressions against HTML."""
import argparse
import logging
import sys
from typing import List, Optional

from pez import __version__
from pez.config import DATE_FORMAT, LOG_FORMAT, USAGE_TEMPLATE
from pez.errors import ArgumentError, PezError
from pez.pipeline import execute_xpath_expression

PROG = "pez"


class ArgumentParser(argparse.ArgumentParser):
  """Argument parser that raises instead of exiting on bad input."""

  def error(self, message):
    raise ArgumentError(message)


def setup_logging(debug: bool = False, verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
  """
  Configure and return the pez logger.

  Args:
      debug: Whether to enable debug logging
      verbose: Whether to show informational messages
      log_file: Optional file that receives the same records

  Returns:
      Configured logger instance
  """
  logger = logging.getLogger('pez')
  if debug:
    logger.setLevel(logging.DEBUG)
  elif verbose:
    logger.setLevel(logging.INFO)
  else:
    logger.setLevel(logging.WARNING)

  # Clear existing handlers if any
  if logger.handlers:
    logger.handlers.clear()

  console_handler = logging.StreamHandler(sys.stderr)
  console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
  logger.addHandler(console_handler)

  if log_file:
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(file_handler)
    logger.info(f"Logging to file: {log_file}")

  return logger


def build_parser() -> ArgumentParser:
  """Build the argument parser."""
  parser = ArgumentParser(
      prog=PROG,
      usage="%(prog)s [-N <known-ns-list>] <xpath-expr> [<html-file-or-url>]",
      description="Evaluate an XPath expression against an HTML file, URL or stdin"
  )

  parser.add_argument("xpath", nargs="?", help="XPath expression to evaluate")
  parser.add_argument("source", nargs="?",
                      help="HTML file or URL (reads stdin when omitted or '-')")

  parser.add_argument("-N", "--namespaces", dest="ns_list", metavar="<known-ns-list>",
                      help="Known namespaces in \"<prefix1>=<href1> <prefix2>=<href2> ...\" format")
  parser.add_argument("-a", "--attributes", action="store_true", default=False,
                      help="Also print matched attribute values")
  parser.add_argument("-v", "--verbose", action="store_true", default=False,
                      help="Show informational log messages")
  parser.add_argument("--debug", action="store_true", default=False,
                      help="Enable debug logging")
  parser.add_argument("--log-file", help="Also write log messages to this file")
  parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

  return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
  """
  Parse command line arguments.

  Raises:
      ArgumentError: If the arguments are malformed or the expression is missing
  """
  parser = build_parser()
  args = parser.parse_args(argv)
  if args.xpath is None:
    raise ArgumentError("Missing required XPath expression.")
  return args


def usage() -> None:
  """Print usage information to stderr."""
  sys.stderr.write(USAGE_TEMPLATE.format(prog=PROG))


def main(argv: Optional[List[str]] = None) -> int:
  """Main entry point for the CLI."""
  try:
    args = parse_args(argv)
  except ArgumentError as e:
    print(f"Error: {str(e)}", file=sys.stderr)
    usage()
    return 1

  logger = setup_logging(debug=args.debug, verbose=args.verbose, log_file=args.log_file)

  try:
    execute_xpath_expression(
        source=args.source,
        xpath_expr=args.xpath,
        ns_list=args.ns_list,
        attributes=args.attributes
    )
    return 0

  except PezError as e:
    print(f"Error: {str(e)}", file=sys.stderr)
    logger.debug("Traceback:", exc_info=True)
    return 1

  except Exception as e:
    print(f"Error: unexpected failure: {str(e)}", file=sys.stderr)
    logger.debug("Traceback:", exc_info=True)
    return 1


if __name__ == "__main__":
  sys.exit(main())
