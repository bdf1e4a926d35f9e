"""
Single-Page Archiver

Saves a complete web page, with its stylesheets, scripts, images and
other assets, into a single self-contained HTML file.

This package holds the command line surface: the argument schema, the
resolution of arguments and environment into an Options record, and the
ambient configuration and logging used by the tool.
"""

__version__ = "0.1.0"
