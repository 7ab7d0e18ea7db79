"""Errors raised while collecting the inputs for a presigned URL."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


class ValidationFailure(Exception):
    """One or more inputs were rejected.

    ``errors`` holds every ValidationError found, ``headline`` an optional
    line printed before them.
    """

    def __init__(self, errors, headline=None):
        self.errors = list(errors)
        self.headline = headline
        super().__init__(headline or '; '.join(e.message for e in self.errors))

    @classmethod
    def single(cls, field, message):
        return cls([ValidationError(field, message)])

    @property
    def messages(self):
        return [e.message for e in self.errors]
