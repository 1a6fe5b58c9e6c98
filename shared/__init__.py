"""Shared helpers used by every tool."""
