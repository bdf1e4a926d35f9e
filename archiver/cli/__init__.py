"""
Command Line Interface for the Single-Page Archiver

This package declares the command line arguments and resolves them into
the Options record used by the rest of the tool.

Classes:
    CLIManager: Command line interface manager for the archiver
    ArgumentSpec: Declaration of a single command line argument
"""

from archiver.cli.schema import ARGUMENTS, ArgumentSpec, Arity, build_parser
from archiver.cli.arguments import CLIManager

__all__ = ['CLIManager', 'ARGUMENTS', 'ArgumentSpec', 'Arity', 'build_parser']
