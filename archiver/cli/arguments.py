"""
Command Line Argument Parsing for the Single-Page Archiver

Parses process arguments against the argument schema and resolves them
into the Options record handed to the rest of the application.
"""

import argparse
from typing import Any, List, Mapping, Optional

from archiver.cli.schema import build_parser, get_epilog
from archiver.core.base import OptionsError
from archiver.core.options import Options, OptionsResolver


class CLIManager:
    """
    Command line interface manager for the archiver

    Builds the parser from the argument schema and resolves parsed
    arguments, together with the environment, into Options.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None,
                 stream: Any = None, prog: Optional[str] = None):
        self.parser = build_parser(prog)
        self.resolver = OptionsResolver(environ=environ, stream=stream)

    def parse_arguments(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command line arguments

        Args:
            args: Command line arguments (uses sys.argv if None)

        Returns:
            Parsed arguments namespace. Arguments without a parser-level
            default are missing from it when not supplied.
        """
        return self.parser.parse_args(args)

    def parse_options(self, args: Optional[List[str]] = None) -> Options:
        """
        Parse command line arguments and resolve them into Options

        Args:
            args: Command line arguments (uses sys.argv if None)

        Returns:
            Resolved Options

        Exits with status 2 and a usage message if the target is missing
        or the timeout is not an unsigned integer.
        """
        parsed_args = self.parse_arguments(args)
        try:
            return self.resolver.resolve(vars(parsed_args))
        except OptionsError as e:
            self.parser.error(str(e))

    def format_help(self) -> str:
        """Get the full help text"""
        return self.parser.format_help()

    def print_help(self) -> None:
        """Print help message"""
        self.parser.print_help()

    def get_usage_examples(self) -> str:
        """
        Get usage examples for documentation

        Returns:
            Formatted usage examples
        """
        return get_epilog()
