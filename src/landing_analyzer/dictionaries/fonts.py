"""Font-stack tokens that ship with operating systems or are CSS generics."""

SYSTEM_FONT_NAMES = (
    # System UI
    "system-ui", "-apple-system", "BlinkMacSystemFont",
    "ui-sans-serif", "ui-serif", "ui-monospace", "Segoe UI", "Roboto",
    # Generic families
    "serif", "sans-serif", "monospace", "cursive", "fantasy",
    # Common OS fonts
    "Arial", "Helvetica", "Helvetica Neue", "Times", "Times New Roman", "Georgia",
    "Verdana", "Tahoma", "Trebuchet MS", "Impact", "Comic Sans MS",
    "Courier", "Courier New", "Lucida Console", "Palatino",
    # Emoji fallbacks
    "Apple Color Emoji", "Segoe UI Emoji", "Noto Color Emoji",
)

SYSTEM_FONT_SET = frozenset(name.lower() for name in SYSTEM_FONT_NAMES)
