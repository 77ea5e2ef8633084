"""Text report output."""

from .writer import ReportWriter, error_lines, result_lines, warning_lines

__all__ = ["ReportWriter", "error_lines", "result_lines", "warning_lines"]
