"""Menus, menu items and the main menu bar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass
class MenuItem:
    """A single menu entry with a label and an action called when tapped."""

    label: str
    action: Optional[Callable[[], None]] = None


@dataclass
class Menu:
    """A labelled list of items, shown from a main menu or as a pop-up."""

    label: str
    items: List[MenuItem] = field(default_factory=list)


@dataclass
class MainMenu:
    """The top level menus of a window."""

    items: List[Menu] = field(default_factory=list)


def new_menu(label: str, *args: MenuItem) -> Menu:
    """Create a menu with the given label and items."""
    return Menu(label, list(args))


def new_main_menu(*args: Menu) -> MainMenu:
    """Create a main menu holding the given menus."""
    return MainMenu(list(args))