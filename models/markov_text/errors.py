"""
Error types raised by the markov_text package.

All of them derive from ValueError so callers that already guard model
construction with ``except ValueError`` keep working.
"""


class MarkovTextError(ValueError):
    """Base class for errors raised while training or generating."""


class ConfigurationError(MarkovTextError):
    """Raised when the generator is given an unusable sample size or length."""


class EmptyModelError(MarkovTextError):
    """Raised when the source text produces no trainable samples."""
