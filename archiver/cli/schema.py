"""
Argument Schema for the Single-Page Archiver

Declares every recognized command line argument in one place. The same
declaration builds the parser and the generated help text.
"""

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

from archiver import __version__
from archiver.core.options import DEFAULT_NETWORK_TIMEOUT


BANNER = r"""
                    _      _
  __ _  _ __   ___ | |__  (_)__   __  ___  _ __
 / _` || '__| / __|| '_ \ | |\ \ / / / _ \| '__|
| (_| || |   | (__ | | | || | \ V / |  __/| |
 \__,_||_|    \___||_| |_||_|  \_/   \___||_|
"""

DESCRIPTION = "Save a complete web page as a single self-contained HTML file"

ABSENT = argparse.SUPPRESS


class HelpFormatter(argparse.ArgumentDefaultsHelpFormatter,
                    argparse.RawDescriptionHelpFormatter):
    """Show defaults while keeping the banner and epilog layout"""
    pass


class Arity(Enum):
    """How many values an argument takes"""
    FLAG = "flag"
    SINGLE = "single"
    APPEND = "append"
    POSITIONAL = "positional"


@dataclass(frozen=True)
class ArgumentSpec:
    """Declaration of a single command line argument"""
    dest: str
    help: str
    arity: Arity = Arity.FLAG
    short: Optional[str] = None
    long: Optional[str] = None
    default: Any = None
    required: bool = False
    metavar: Optional[str] = None

    def flags(self) -> List[str]:
        """Option strings for this argument, short form first"""
        return [name for name in (self.short, self.long) if name]

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        """Register this argument on an argparse parser"""
        if self.arity is Arity.POSITIONAL:
            parser.add_argument(self.dest, metavar=self.metavar, help=self.help)
            return

        kwargs = {"dest": self.dest, "help": self.help}
        if self.arity is Arity.FLAG:
            kwargs["action"] = "store_true"
        else:
            kwargs["action"] = "append" if self.arity is Arity.APPEND else "store"
            kwargs["default"] = self.default
            kwargs["metavar"] = self.metavar
        if self.required:
            kwargs["required"] = True
        parser.add_argument(*self.flags(), **kwargs)


ARGUMENTS: Tuple[ArgumentSpec, ...] = (
    ArgumentSpec("no_audio", "Remove audio sources", short="-a", long="--no-audio"),
    ArgumentSpec(
        "base_url", "Set custom base URL", Arity.SINGLE,
        short="-b", long="--base-url", default="http://localhost/", metavar="URL"
    ),
    ArgumentSpec(
        "blacklist_domains", "Treat list of specified domains as blacklist",
        short="-B", long="--blacklist-domains"
    ),
    ArgumentSpec("no_css", "Remove CSS", short="-c", long="--no-css"),
    ArgumentSpec(
        "cookie_file", "Specify cookie file", Arity.SINGLE,
        short="-C", long="--cookies", default="cookies.txt", metavar="FILE"
    ),
    ArgumentSpec(
        "domains", "Specify domains to use for white/black-listing (repeatable)",
        Arity.APPEND, short="-d", long="--domain", default=ABSENT, metavar="example.com"
    ),
    ArgumentSpec("ignore_errors", "Ignore network errors", short="-e", long="--ignore-errors"),
    ArgumentSpec(
        "encoding", "Enforce custom charset", Arity.SINGLE,
        short="-E", long="--encoding", default="UTF-8", metavar="CHARSET"
    ),
    ArgumentSpec("no_frames", "Remove frames and iframes", short="-f", long="--no-frames"),
    ArgumentSpec("no_fonts", "Remove fonts", short="-F", long="--no-fonts"),
    ArgumentSpec("no_images", "Remove images", short="-i", long="--no-images"),
    ArgumentSpec("isolate", "Cut off document from the Internet", short="-I", long="--isolate"),
    ArgumentSpec("no_js", "Remove JavaScript", short="-j", long="--no-js"),
    ArgumentSpec("insecure", "Allow invalid X.509 (TLS) certificates", short="-k", long="--insecure"),
    ArgumentSpec(
        "no_metadata", "Exclude timestamp and source information",
        short="-M", long="--no-metadata"
    ),
    ArgumentSpec(
        "unwrap_noscript", "Replace NOSCRIPT elements with their contents",
        short="-n", long="--unwrap-noscript"
    ),
    ArgumentSpec(
        "output", "Write output to FILE, use - for STDOUT", Arity.SINGLE,
        short="-o", long="--output", default="document.html", metavar="FILE"
    ),
    ArgumentSpec("silent", "Suppress verbosity", short="-s", long="--silent"),
    ArgumentSpec(
        "timeout",
        f"Adjust network request timeout in seconds (default: {DEFAULT_NETWORK_TIMEOUT})",
        Arity.SINGLE, short="-t", long="--timeout", default=ABSENT, metavar="SECONDS"
    ),
    ArgumentSpec(
        "user_agent", "Set custom User-Agent string (default: Firefox)", Arity.SINGLE,
        short="-u", long="--user-agent", default=ABSENT, metavar="AGENT"
    ),
    ArgumentSpec("no_video", "Remove video sources", short="-v", long="--no-video"),
    ArgumentSpec(
        "target", "URL or file path, use - for STDIN", Arity.POSITIONAL,
        required=True, metavar="TARGET"
    ),
)


def get_epilog() -> str:
    """Usage examples shown at the end of the help text"""
    return """
Examples:
  # Save a page with its default settings
  archiver https://example.com

  # Strip audio and CSS, write to a custom file
  archiver -a -c -o page.html https://example.com

  # Only load assets from the listed domains
  archiver -d example.com -d cdn.example.com https://example.com

  # Read the document from STDIN and write it to STDOUT
  cat page.html | archiver -b https://example.com/ -o - -

Environment:
  NO_COLOR    disable colored output when set to any value
  TERM        colored output is disabled when set to "dumb"
"""


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create an argument parser from the declared arguments

    Args:
        prog: Program name shown in usage text

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"{BANNER}\n{DESCRIPTION}",
        formatter_class=HelpFormatter,
        epilog=get_epilog()
    )

    for spec in ARGUMENTS:
        spec.add_to(parser)

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser
