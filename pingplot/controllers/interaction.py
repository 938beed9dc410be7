QUIT_KEYS = frozenset({"q", "Q"})


def is_quit_key(key):
    """`key` is a curses key code or a one-character string."""
    if isinstance(key, int):
        if key < 0:
            return False
        try:
            key = chr(key)
        except (ValueError, OverflowError):
            return False
    return key in QUIT_KEYS
