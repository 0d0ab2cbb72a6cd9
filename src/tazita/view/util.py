# SPDX-License-Identifier: MIT

from typing import Optional

from tazita.model.coffee_type import get_coffee_type_info
from tazita.model.theme import ThemeColors, get_theme_config
from tazita.view.state import get_theme


def theme_colors() -> ThemeColors:
    return get_theme_config(get_theme())["colors"]


def format_coffee_type(coffee_type: Optional[str]) -> str:
    info = get_coffee_type_info(coffee_type)
    return f"{info['emoji']} {info['name']}"


def bar(percent: float, width: int = 20) -> str:
    filled = round(max(0.0, min(percent, 100.0)) / 100 * width)
    return "█" * filled + "░" * (width - filled)


def plural(count: int, singular: str, plural_form: str) -> str:
    return singular if count == 1 else plural_form
