"""Route pattern errors."""


class PatternCompileError(ValueError):
    """Compiled route pattern rejected by the regex engine."""

    def __init__(self, source: str, reason: str = "") -> None:
        """Initialize error with the offending pattern source."""
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid route pattern '{source}': {reason}")
