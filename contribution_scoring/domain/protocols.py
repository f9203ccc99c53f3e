"""Protocol definitions for pipeline modules and scorers.

Modules and scorers are plugged in by composition: anything exposing
these attributes and coroutines can be registered, no base class needed.
"""

from typing import Protocol, runtime_checkable

from contribution_scoring.domain.events import EventEnvelope, EventTypeMatcher
from contribution_scoring.domain.models import PipelineResult, ScorerResult


@runtime_checkable
class PipelineModule(Protocol):
    """A named transformation step with an event-type capability test."""

    name: str
    supported_event_types: EventTypeMatcher

    def can_process(self, event: EventEnvelope) -> bool:
        """Check whether this module applies to ``event``.

        Args:
            event: Incoming event envelope

        Returns:
            True if the module's event-type matcher accepts ``event.type``
        """
        ...

    async def transform(
        self, event: EventEnvelope, result: PipelineResult
    ) -> PipelineResult:
        """Derive a new result from ``event`` and the accumulated ``result``.

        Implementations must tolerate partially populated results and
        missing payload fields, encoding problems as diagnostics rather
        than raising.

        Args:
            event: Incoming event envelope
            result: Result produced by earlier modules in the chain

        Returns:
            Updated result (may be ``result`` itself when nothing changes)
        """
        ...


@runtime_checkable
class Scorer(Protocol):
    """A pure mapping from text content to a normalized quality signal."""

    id: str
    weight: float

    async def score(self, content: str) -> ScorerResult:
        """Score ``content``.

        Args:
            content: Text to score

        Returns:
            Raw score (0-100), weighted normalized score (0-1) and metrics
        """
        ...
