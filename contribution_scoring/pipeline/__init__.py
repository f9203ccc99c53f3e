"""Pipeline package exports."""

from contribution_scoring.pipeline.chain import ChainRegistry, ModuleChain
from contribution_scoring.pipeline.factory import (
    create_default_chain,
    create_router,
    initialize_logging,
)
from contribution_scoring.pipeline.router import EventRouter

__all__ = [
    "ChainRegistry",
    "EventRouter",
    "ModuleChain",
    "create_default_chain",
    "create_router",
    "initialize_logging",
]
