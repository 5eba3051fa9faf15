"""Outline MCP Server - Outline documents, collections, comments and users over MCP."""

__version__ = "1.2.0"
