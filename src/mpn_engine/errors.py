"""Exceptions raised while building the engine.

Classification, extraction and scoring never raise for bad part numbers;
these errors only surface from malformed rule tables or misuse of a sealed
registry, both of which are configuration mistakes.
"""


class MPNEngineError(Exception):
    """Base class for engine configuration errors."""


class InvalidPatternError(MPNEngineError):
    """A rule's regular expression failed to compile."""

    def __init__(self, pattern: str, owner: str, reason: str):
        self.pattern = pattern
        self.owner = owner
        super().__init__(f"Invalid pattern {pattern!r} from {owner or 'unknown owner'}: {reason}")


class RegistryFrozenError(MPNEngineError):
    """A new rule was registered after the registry was sealed."""

    def __init__(self, pattern: str, owner: str):
        self.pattern = pattern
        self.owner = owner
        super().__init__(f"Registry is frozen; cannot add {pattern!r} from {owner or 'unknown owner'}")
