"""
Color Print Utilities

Colored console output for the rolltoken command. User-facing only; this
does not affect logging.
"""

import sys


class Colors:
    RESET = '\033[0m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    BOLD = '\033[1m'


def _supports_color(stream):
    return hasattr(stream, 'isatty') and stream.isatty()


def print_color(text, color=Colors.RESET, bold=False, stream=None):
    """
    Print text in the specified color.

    Color codes are only emitted when the stream is a terminal.

    Args:
        text: The text to print
        color: The color to use (from Colors class)
        bold: Whether to make the text bold
        stream: Output stream, defaults to stdout
    """
    if stream is None:
        stream = sys.stdout
    if not _supports_color(stream):
        print(text, file=stream)
    elif bold:
        print(f"{Colors.BOLD}{color}{text}{Colors.RESET}", file=stream)
    else:
        print(f"{color}{text}{Colors.RESET}", file=stream)


def print_info(text, stream=None):
    """Print an informational message in cyan."""
    print_color(text, Colors.CYAN, stream=stream)


def print_success(text, stream=None):
    """Print a success message in green."""
    print_color(text, Colors.GREEN, stream=stream)


def print_warning(text, stream=None):
    """Print a warning message in yellow."""
    print_color(text, Colors.YELLOW, stream=stream)


def print_error(text, stream=None):
    """Print an error message in red."""
    print_color(text, Colors.RED, bold=True, stream=stream)
