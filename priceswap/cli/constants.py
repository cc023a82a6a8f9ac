"""Exit codes shared by CLI commands."""

VALIDATION_EXIT_CODE = 10
FEED_UNAVAILABLE_EXIT_CODE = 20

__all__ = ["FEED_UNAVAILABLE_EXIT_CODE", "VALIDATION_EXIT_CODE"]
