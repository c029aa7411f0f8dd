"""Shared utilities for MCP tools."""
