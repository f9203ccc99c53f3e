"""Custom exception hierarchy for contribution scoring.

Filter rejections and scorer failures are represented as data on the
pipeline result, never as exceptions. Only configuration mistakes and
misbehaving modules surface as errors.
"""


class ContributionScoringError(Exception):
    """Base exception for all application errors."""

    pass


class ConfigurationError(ContributionScoringError):
    """Invalid pipeline, module or scorer configuration.

    Raised while the pipeline is being assembled, never per event.
    """

    pass


class ModuleExecutionError(ContributionScoringError):
    """A module raised while transforming an event inside a chain."""

    def __init__(self, chain_name: str, module_name: str, event_id: str) -> None:
        """Initialize with the chain and module that failed."""
        self.chain_name = chain_name
        self.module_name = module_name
        self.event_id = event_id
        super().__init__(
            f"Module '{module_name}' failed in chain '{chain_name}' "
            f"for event {event_id}"
        )
