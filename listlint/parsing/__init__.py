"""Markdown parsing adapters."""

from .markdown import parse_markdown

__all__ = ["parse_markdown"]
