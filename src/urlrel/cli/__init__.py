# topmark:header:start
#
#   project      : UrlRel
#   file         : __init__.py
#   file_relpath : src/urlrel/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for UrlRel.

The CLI is a thin boundary around [`urlrel.url.make_relative`][]: argument
validation errors raised by the library surface as usage errors (exit code 64).
"""
