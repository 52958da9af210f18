# topmark:header:start
#
#   project      : UrlRel
#   file         : __init__.py
#   file_relpath : src/urlrel/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click commands of the UrlRel CLI."""
