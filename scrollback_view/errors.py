"""Exception types for scrollback-view."""


class ScrollbackError(Exception):
    """Base error for the scrollback-view command line and loaders."""


class ScrollbackConfigError(ScrollbackError):
    """Raised when a config file or environment override is invalid."""
