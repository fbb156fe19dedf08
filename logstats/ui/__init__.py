"""Presentation of analysis results."""

from .report import format_timestamp, render_summary

__all__ = ['format_timestamp', 'render_summary']
