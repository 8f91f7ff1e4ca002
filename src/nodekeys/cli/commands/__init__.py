# topmark:header:start
#
#   project      : NodeKeys
#   file         : __init__.py
#   file_relpath : src/nodekeys/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NodeKeys CLI subcommands."""
