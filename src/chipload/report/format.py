"""Low-level report line formatting helpers."""

from __future__ import annotations

REPORT_WIDTH = 84


def fmt(value: float, decimals: int = 2) -> str:
    """Format a float for the report, stripping trailing zeros."""
    return f"{value:.{decimals}f}".rstrip("0").rstrip(".")


def rule(char: str = "=", width: int = REPORT_WIDTH) -> str:
    return char * width


def banner(title: str, width: int = REPORT_WIDTH) -> list[str]:
    """Title centred between two full-width rules."""
    return [rule(width=width), title.center(width).rstrip(), rule(width=width)]


def heading(title: str) -> list[str]:
    """Title underlined and overlined to its own length."""
    bar = "=" * len(title)
    return [bar, title, bar]


def checkbox(text: str) -> str:
    return f"□ {text}"
