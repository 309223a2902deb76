"""
Exception classes for the preference ranker.

Centralized location for all custom exceptions to avoid circular imports.
"""


class JudgeError(Exception):
    """Base exception for all judge-related errors."""
    pass


class ValidationError(Exception):
    """Base exception for validation-related errors."""
    pass


class InvalidPreferenceError(ValidationError):
    """A preference names an unknown item or two items that are not comparable."""
    pass


class SessionStateError(Exception):
    """An operation was called in the wrong session state."""
    pass


class RankingIncompleteError(Exception):
    """The results chain does not hold every registered item exactly once."""
    pass


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""
    pass


class JudgmentLimitError(Exception):
    """The ranking was not resolved within the allowed number of judgments."""
    pass
