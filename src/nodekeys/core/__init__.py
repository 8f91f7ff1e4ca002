# topmark:header:start
#
#   project      : NodeKeys
#   file         : __init__.py
#   file_relpath : src/nodekeys/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core flattening and keying primitives.

Keep this package import-light: `nodekeys.config` imports `nodekeys.core.errors`,
so nothing here may import the config layer at package import time.
"""
