"""Per-run view settings shared by every report, held in context variables."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

from tazita.model.theme import DEFAULT_THEME, Theme

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)
_theme_var: ContextVar[Theme] = ContextVar("theme", default=DEFAULT_THEME)


def set_show_header(value: bool) -> None:
    """Turn the tazita header above reports on or off."""
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_theme(value: Theme) -> None:
    """Palette the reports are colored with, usually the active user's theme."""
    _theme_var.set(value)


def get_theme() -> Theme:
    return _theme_var.get()
