"""
Outcome DTOs of a pipeline run.

A run ends in exactly one of two outcomes. Both are plain,
immutable dataclasses with no behavior beyond convenience accessors.
"""

from dataclasses import dataclass
from typing import Union

from errorkit.domain.errors.entities import (
    CanonicalError,
    ResponsePayload,
    SeverityCategory,
)
from errorkit.domain.errors.exceptions import UnclassifiableStatusError


@dataclass(frozen=True)
class NormalOutcome:
    """The error was classified and rendered.

    Attributes:
        error: The canonical error.
        category: CLIENT or SERVER.
        payload: The rendered response payload.
    """

    error: CanonicalError
    category: SeverityCategory
    payload: ResponsePayload

    @property
    def status(self) -> int:
        return self.error.status


@dataclass(frozen=True)
class FallbackOutcome:
    """Classification failed and the unexpected-error fallback ran.

    Attributes:
        error: The canonical error that could not be classified.
        reason: The classification failure.
        payload: The fallback payload.
    """

    error: CanonicalError
    reason: UnclassifiableStatusError
    payload: ResponsePayload


PipelineOutcome = Union[NormalOutcome, FallbackOutcome]
