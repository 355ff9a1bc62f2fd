"""ANSI escape helpers for coloured terminal text."""

TEXT_BLACK = 30
TEXT_RED = 31
TEXT_GREEN = 32
TEXT_YELLOW = 33
TEXT_BLUE = 34
TEXT_MAGENTA = 35
TEXT_CYAN = 36
TEXT_WHITE = 37

_ESC = "\x1b"


def set_color(msg, conf, bg, text):
    """Wrap ``msg`` in an SGR sequence built from ``conf``, ``bg`` and ``text``, then reset."""
    return f"{_ESC}[{conf};{bg};{text}m{msg}{_ESC}[0m"


def black(msg):
    """Return ``msg`` in black."""
    return set_color(msg, 0, 0, TEXT_BLACK)


def red(msg):
    """Return ``msg`` in red."""
    return set_color(msg, 0, 0, TEXT_RED)


def green(msg):
    """Return ``msg`` in green."""
    return set_color(msg, 0, 0, TEXT_GREEN)


def yellow(msg):
    """Return ``msg`` in yellow."""
    return set_color(msg, 0, 0, TEXT_YELLOW)


def blue(msg):
    """Return ``msg`` in blue."""
    return set_color(msg, 0, 0, TEXT_BLUE)


def magenta(msg):
    """Return ``msg`` in magenta."""
    return set_color(msg, 0, 0, TEXT_MAGENTA)


def cyan(msg):
    """Return ``msg`` in cyan."""
    return set_color(msg, 0, 0, TEXT_CYAN)


def white(msg):
    """Return ``msg`` in white."""
    return set_color(msg, 0, 0, TEXT_WHITE)