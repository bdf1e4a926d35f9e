"""
Options Resolution for the Single-Page Archiver

Turns the raw token map produced by argument parsing, together with the
process environment, into the immutable Options record consumed by the
fetcher, the document rewriter and the terminal renderer.
"""

import os
import re
import sys
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from archiver.core.base import (
    Cookie,
    MissingRequiredArgumentError,
    MalformedNumericOptionError
)


DEFAULT_NETWORK_TIMEOUT = 120
MAX_TIMEOUT = 2 ** 64 - 1
DEFAULT_OUTPUT_FALLBACK = ""
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:73.0) Gecko/20100101 Firefox/73.0"
)
ENV_VAR_NO_COLOR = "NO_COLOR"
ENV_VAR_TERM = "TERM"

FLAG_FIELDS = (
    "no_audio",
    "blacklist_domains",
    "no_css",
    "ignore_errors",
    "no_frames",
    "no_fonts",
    "no_images",
    "isolate",
    "no_js",
    "insecure",
    "no_metadata",
    "silent",
    "unwrap_noscript",
    "no_video",
)

OPTIONAL_FIELDS = ("base_url", "cookie_file", "encoding")

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Options:
    """Resolved configuration for a single archiving run"""
    target: str
    output: str = "document.html"
    base_url: Optional[str] = None
    cookie_file: Optional[str] = None
    cookies: Tuple[Cookie, ...] = ()
    domains: Optional[Tuple[str, ...]] = None
    blacklist_domains: bool = False
    encoding: Optional[str] = None
    timeout: int = DEFAULT_NETWORK_TIMEOUT
    user_agent: Optional[str] = DEFAULT_USER_AGENT
    no_audio: bool = False
    no_css: bool = False
    no_frames: bool = False
    no_fonts: bool = False
    no_images: bool = False
    no_js: bool = False
    no_video: bool = False
    no_metadata: bool = False
    unwrap_noscript: bool = False
    isolate: bool = False
    insecure: bool = False
    ignore_errors: bool = False
    silent: bool = False
    no_color: bool = False

    def with_cookies(self, cookies: Iterable[Cookie]) -> "Options":
        """Return a copy carrying cookies loaded from ``cookie_file``"""
        return replace(self, cookies=tuple(cookies))

    def as_dict(self) -> Dict[str, Any]:
        """Plain mapping of the record, cookies reduced to a count"""
        data = asdict(replace(self, cookies=()))
        data["cookies"] = len(self.cookies)
        return data


def resolve_no_color(environ: Mapping[str, str], stream: Any) -> bool:
    """
    Decide whether colored terminal output must be suppressed

    Args:
        environ: Environment variable mapping
        stream: The error output stream

    Returns:
        True if NO_COLOR is set (any value), the stream is not a terminal,
        or TERM is ``dumb``
    """
    no_color = ENV_VAR_NO_COLOR in environ or not _is_terminal(stream)
    if environ.get(ENV_VAR_TERM) == "dumb":
        no_color = True
    return no_color


def _is_terminal(stream: Any) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def parse_timeout(text: str) -> int:
    """Parse a timeout value as an unsigned integer number of seconds"""
    if not _UNSIGNED_INT.fullmatch(text):
        raise MalformedNumericOptionError("timeout", text)
    value = int(text)
    if value > MAX_TIMEOUT:
        raise MalformedNumericOptionError("timeout", text)
    return value


class OptionsResolver:
    """
    Build Options records from raw parsed arguments

    The environment and the error stream are injected so resolution can be
    driven by a fake environment. Resolution holds no state between calls.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, stream: Any = None):
        self.environ = os.environ if environ is None else environ
        self.stream = sys.stderr if stream is None else stream

    def resolve(self, raw: Mapping[str, Any]) -> Options:
        """
        Resolve a raw token map into an Options record

        Args:
            raw: Mapping of argument destination name to parsed value(s).
                A key that is missing or None is treated as absent.

        Returns:
            Fully resolved Options

        Raises:
            MissingRequiredArgumentError: If the target is absent or empty
            MalformedNumericOptionError: If the timeout is not numeric
        """
        target = raw.get("target")
        if not target:
            raise MissingRequiredArgumentError("target")

        values: Dict[str, Any] = {name: bool(raw.get(name, False)) for name in FLAG_FIELDS}

        output = raw.get("output")
        values["output"] = DEFAULT_OUTPUT_FALLBACK if output is None else str(output)

        timeout = raw.get("timeout")
        values["timeout"] = parse_timeout(
            str(DEFAULT_NETWORK_TIMEOUT if timeout is None else timeout)
        )

        for name in OPTIONAL_FIELDS:
            value = raw.get(name)
            values[name] = None if value is None else str(value)

        user_agent = raw.get("user_agent")
        values["user_agent"] = DEFAULT_USER_AGENT if user_agent is None else str(user_agent)

        domains = raw.get("domains")
        values["domains"] = tuple(domains) if domains else None

        values["no_color"] = resolve_no_color(self.environ, self.stream)

        return Options(target=str(target), **values)
