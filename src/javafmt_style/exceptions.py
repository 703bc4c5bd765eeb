class JavaFmtStyleError(Exception):
    """Base class for style configuration errors"""


class UnknownStyleError(JavaFmtStyleError, ValueError):
    """Raised when a style name does not match any preset"""

    def __init__(self, name: str, choices: list[str]):
        self.name = name
        self.choices = choices
        super().__init__(f"Unknown style '{name}' (expected one of: {', '.join(choices)})")


class ConfigError(JavaFmtStyleError):
    """Raised when a config file holds an invalid value"""
