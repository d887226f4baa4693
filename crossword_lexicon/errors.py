"""
Exception hierarchy for the master dictionary build.

Recoverable conditions (a missing source file, an unparseable line) never raise;
they are counted in the per-source statistics. Everything defined here is fatal
to a run and is turned into a non-zero exit code by the command line entry point.
"""


class LexiconError(Exception):
    """Base class for fatal build errors."""


class ConfigurationError(LexiconError):
    """Source directory, output directory, registry or bounds are unusable."""


class OutputWriteError(LexiconError):
    """The master dictionary could not be created, written or renamed into place."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class InvariantViolationError(LexiconError):
    """An entry that breaks the dictionary invariants reached the writer."""

    def __init__(self, word, score, reason):
        self.word = word
        self.score = score
        self.reason = reason
        super().__init__(f"Invalid entry {word!r};{score!r}: {reason}")


class SourceReadError(LexiconError):
    """A registered source file exists but cannot be read."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read source {path}: {cause}")
