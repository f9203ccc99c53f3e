"""Module chains and the chain registry.

A chain is an immutable, ordered tuple of modules executed sequentially
for one event. Order matters: later modules read flags set by earlier
ones (the content filter's ``filtered`` flag gates scoring).
"""

from collections.abc import Iterable, Iterator

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.events import EventEnvelope
from contribution_scoring.domain.exceptions import (
    ConfigurationError,
    ModuleExecutionError,
)
from contribution_scoring.domain.models import PipelineResult
from contribution_scoring.domain.protocols import PipelineModule

logger = get_logger(__name__)


class ModuleChain:
    """Named, ordered, immutable sequence of modules."""

    __slots__ = ("_name", "_modules")

    def __init__(self, name: str, modules: Iterable[PipelineModule]) -> None:
        """Initialize module chain.

        Args:
            name: Chain identity, unique within a registry
            modules: Modules in execution order

        Raises:
            ConfigurationError: If the name is empty or module names repeat
        """
        if not name:
            raise ConfigurationError("Chain name must not be empty")

        ordered = tuple(modules)
        names = [module.name for module in ordered]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ConfigurationError(
                f"Chain '{name}' has duplicate module names: {', '.join(duplicates)}"
            )

        self._name = name
        self._modules = ordered

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> tuple[PipelineModule, ...]:
        return self._modules

    @property
    def module_names(self) -> list[str]:
        return [module.name for module in self._modules]

    def __len__(self) -> int:
        return len(self._modules)

    def __repr__(self) -> str:
        return f"ModuleChain({self._name!r}, {self.module_names!r})"

    async def execute(
        self,
        event: EventEnvelope,
        initial_result: PipelineResult | None = None,
    ) -> PipelineResult:
        """Run every capable module in order, threading one result through.

        Args:
            event: Event to process
            initial_result: Starting result (empty by default)

        Returns:
            Final result; empty when no module could process the event

        Raises:
            ModuleExecutionError: If a module's transform raises
        """
        result = initial_result if initial_result is not None else PipelineResult()
        executed: list[str] = []

        for module in self._modules:
            if not module.can_process(event):
                continue

            try:
                updated = await module.transform(event, result)
            except Exception as e:
                logger.error(
                    "chain_module_failed",
                    chain=self._name,
                    module=module.name,
                    event_id=event.id,
                    error=str(e),
                    exc_info=True,
                )
                raise ModuleExecutionError(self._name, module.name, event.id) from e

            if result.filtered is True and updated.filtered is not True:
                logger.warning(
                    "chain_unfilter_ignored",
                    chain=self._name,
                    module=module.name,
                    event_id=event.id,
                )
                continue

            result = updated
            executed.append(module.name)

        logger.debug(
            "chain_executed",
            chain=self._name,
            event_id=event.id,
            executed_modules=executed,
            filtered=result.filtered,
        )
        return result


class ChainRegistry:
    """Chains stored by unique name, in registration order."""

    def __init__(self, chains: Iterable[ModuleChain] = ()) -> None:
        self._chains: dict[str, ModuleChain] = {}
        for chain in chains:
            self.register(chain)

    def register(self, chain: ModuleChain) -> None:
        """Register ``chain``.

        Raises:
            ConfigurationError: If a chain with the same name is registered
        """
        if chain.name in self._chains:
            raise ConfigurationError(f"Chain already registered: {chain.name}")
        self._chains[chain.name] = chain
        logger.info("chain_registered", chain=chain.name, modules=chain.module_names)

    def get(self, name: str) -> ModuleChain | None:
        return self._chains.get(name)

    def chains(self) -> list[ModuleChain]:
        return list(self._chains.values())

    def __len__(self) -> int:
        return len(self._chains)

    def __contains__(self, name: object) -> bool:
        return name in self._chains

    def __iter__(self) -> Iterator[ModuleChain]:
        return iter(self.chains())
