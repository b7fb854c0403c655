"""Line-oriented text buffer engine for a modal terminal editor."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "modes",
    "keymaps",
    "runtime",
    "session",
    "view",
]

__version__ = "0.1.0"
