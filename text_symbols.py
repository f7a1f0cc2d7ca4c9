"""
Text Symbols

Text markers used in console output instead of emojis, so progress lines stay
readable on terminals without unicode support.
"""


class Symbols:
    """Text-based symbols for console output"""

    # Status indicators
    OK = "[OK]"
    ERROR = "[ERROR]"
    WARN = "[WARN]"
    INFO = "[INFO]"

    # Actions
    SKIP = "[SKIP]"

    # Data & Stats
    STATS = "[STATS]"
    REGION = "[REGION]"
    KEY = "[KEY]"

    # Symbols
    CROSS = "[X]"
    ALERT = "[ALERT]"
