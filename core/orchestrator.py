"""Top-level application orchestrator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.event_bus import EventBus
from core.policy_runtime import load_effective_config
from entities.capabilities import Filterable, HasName
from filtering.filter import Filter
from relations.store import RelationshipStore
from research.research import Research

ROOT_ENV_VAR = "FACTSTORE_ROOT"


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    event_bus: EventBus
    store: RelationshipStore[HasName]
    research: Research
    product_filter: Filter[Filterable]


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        env_root = os.environ.get(ROOT_ENV_VAR)
        default_root = Path(env_root) if env_root else Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        event_bus = EventBus()
        store: RelationshipStore[HasName] = RelationshipStore(
            strict=bool(config.get("relations", {}).get("strict", False)),
            event_bus=event_bus,
        )
        return RuntimeBundle(
            config=config,
            event_bus=event_bus,
            store=store,
            # Research sees the store only through its browser queries.
            research=Research(browser=store),
            product_filter=Filter(),
        )
