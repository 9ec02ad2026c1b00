"""
Quick Capture MCP Module

Schemas and tools exposed by the MCP server.
"""
