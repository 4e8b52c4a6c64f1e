from owns.tui.renderers import OwnsConsoleUI

__all__ = ["OwnsConsoleUI"]
