r"""
    ___    ______              __
   /   |  / / __/_______  ____/ /
  / /| | / / /_/ ___/ _ \/ __  /
 / ___ |/ / __/ /  /  __/ /_/ /
/_/  |_/_/_/ /_/   \___/\__,_/

AlfredChat - A minimal terminal chat interface.

Type a line, press Enter, and Alfred answers.
"""

__version__ = "0.1.0"
