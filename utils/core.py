"""
Utility functions for the card API runner.
"""

DEBUG = False


def sync_debug_with_state(state):
    """Sync the cached DEBUG value with the state."""
    global DEBUG
    DEBUG = state.get_variable("DEBUG")


def debug_print(*msg):
    """Print debug messages if DEBUG is enabled."""
    if DEBUG and len(msg) == 1:
        print(f"DEBUG: {msg[0]}")
    elif DEBUG and len(msg) > 1:
        print("DEBUG:", " ".join(str(m) for m in msg))


def set_debug(enabled, state):
    """Set the global debug flag."""
    state.set_variable("DEBUG", "true" if enabled else "false")
    # Immediately sync the module-global DEBUG flag
    sync_debug_with_state(state)
    if DEBUG:
        debug_print(f"Debugging is {'enabled' if enabled else 'disabled'}")


def join_url(base_url, path):
    """Join the API root and an endpoint path with exactly one slash."""
    base = base_url.rstrip("/")
    if not path:
        return base
    if not path.startswith("/"):
        path = "/" + path
    return base + path


def mask_secret(value, visible=4):
    """Hide all but the last few characters of a secret for display."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]
