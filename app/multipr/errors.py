from __future__ import annotations


class MultiPRError(Exception):
    """Base class for failures that end a run before any PR is opened."""


class ConfigError(MultiPRError):
    pass


class PromptIOError(MultiPRError):
    pass


class ValidationError(MultiPRError):
    pass
