# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from tazita.view.state import get_show_header
from tazita.view.util import theme_colors


def header(username: Optional[str], sub_header: Optional[str] = None) -> None:
    """Print the application header with the active user.

    Args:
        username: The active user, if any
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    colors = theme_colors()
    additional = ""
    if sub_header is not None:
        additional = f"[{colors['accent']}]{sub_header}[/{colors['accent']}]"
    user = f"[{colors['text']}]{username or '-'}[/{colors['text']}]"

    title = f"[bold {colors['primary']}]tazita[/bold {colors['primary']}]"

    print(Padding(title, (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(user, (0, 1)))
