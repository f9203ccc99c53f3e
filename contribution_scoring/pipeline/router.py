"""Event router: runs every registered chain for an incoming event."""

import asyncio

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.events import EventEnvelope
from contribution_scoring.domain.models import PipelineResult
from contribution_scoring.observability.tracing import correlation_scope
from contribution_scoring.pipeline.chain import ChainRegistry

logger = get_logger(__name__)


class EventRouter:
    """Route events to all chains of a registry.

    Chains are independent and run concurrently; modules inside a chain
    decide applicability through their own capability tests.
    """

    def __init__(self, registry: ChainRegistry) -> None:
        self.registry = registry

    async def route(self, event: EventEnvelope) -> dict[str, PipelineResult]:
        """Execute all chains for ``event`` and wait for every one of them.

        Args:
            event: Event to process

        Returns:
            Result per chain name, in registration order (empty when no
            chain is registered)

        Raises:
            ModuleExecutionError: If a module in any chain raises; raised
                only after every chain has finished (the first failure wins)
        """
        with correlation_scope(event.id, event_type=event.type):
            chains = self.registry.chains()
            if not chains:
                logger.warning("no_chains_registered", event_type=event.type)
                return {}

            outcomes = await asyncio.gather(
                *(chain.execute(event) for chain in chains), return_exceptions=True
            )

            failures = [
                (chain, outcome)
                for chain, outcome in zip(chains, outcomes, strict=True)
                if isinstance(outcome, BaseException)
            ]
            for chain, error in failures:
                logger.error(
                    "chain_failed",
                    chain=chain.name,
                    error=str(error),
                    error_type=type(error).__name__,
                )
            if failures:
                raise failures[0][1]

            results: dict[str, PipelineResult] = dict(
                zip((chain.name for chain in chains), outcomes, strict=True)
            )
            logger.info(
                "event_routed",
                chain_count=len(chains),
                filtered={name: result.filtered for name, result in results.items()},
            )
            return results
