"""
Constants and display text for the terminal client.
"""

# Screen text
TITLE = "Alfred CLI Chat"
INPUT_PROMPT = "> "
HELP_TEXT = "Press Esc or Ctrl+C to quit."

# UI settings
REFRESH_RATE_HZ = 100  # Input polling rate (100Hz = 10ms)
ESCAPE_DELAY_MS = 25  # How long curses waits to tell Esc from an escape sequence

# Printed to stderr when the terminal session fails
ERROR_PREFIX = "Alas, there's been an error: "
