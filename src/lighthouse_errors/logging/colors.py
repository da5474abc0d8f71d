"""ANSI color codes for terminal log output.

All colors use the 256-color palette.

Usage:
    from lighthouse_errors.logging.colors import RED, RESET

    print(f"{RED}Unclassified protocol error{RESET}")
"""

# Basic colors
RESET = "\033[0m"

RED = "\033[38;5;196m"  # Errors - bright red
YELLOW = "\033[38;5;226m"  # Warnings / fallbacks - bright yellow
LIGHT_BLUE = "\033[38;5;153m"  # Debug and context fields - light blue
CYAN = "\033[38;5;51m"  # Info - cyan
MAGENTA = "\033[38;5;201m"  # Component names - magenta

__all__ = [
    "RESET",
    "RED",
    "YELLOW",
    "LIGHT_BLUE",
    "CYAN",
    "MAGENTA",
]
