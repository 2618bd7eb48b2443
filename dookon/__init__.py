"""
Dookon Store Inspection Tools

Read-only diagnostics for the store back office database and the
error convention shared by its HTTP API.
"""

__version__ = "1.0.0"
