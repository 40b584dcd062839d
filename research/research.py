"""High-level relation research built on the browser contract."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from entities.capabilities import HasName
from relations.browser import RelationshipBrowser

logger = logging.getLogger("factstore.research")


class Research:
    """Describes relations in plain sentences.

    Only the read-only ``RelationshipBrowser`` queries are used, so any
    browser implementation (including test doubles) can back it.
    """

    def __init__(self, browser: RelationshipBrowser[HasName]) -> None:
        self.browser = browser

    def children_of(self, parent: HasName) -> Iterator[str]:
        for child in self.browser.find_all_children_of(parent):
            yield f"{parent.get_name()} has a child called {child.get_name()}"

    def parents_of(self, child: HasName) -> Iterator[str]:
        for parent in self.browser.find_all_parents_of(child):
            yield f"{child.get_name()} has a parent called {parent.get_name()}"

    def siblings_of(self, sibling: HasName) -> Iterator[str]:
        for other in self.browser.find_all_siblings_of(sibling):
            yield f"{sibling.get_name()} has a sibling called {other.get_name()}"

    def spouse_of(self, spouse: HasName) -> str:
        """Describe the spouse; ``RelationNotFoundError`` propagates."""
        other = self.browser.find_spouse_of(spouse)
        logger.debug("Spouse of %s resolved", spouse.get_name())
        return f"{spouse.get_name()} has a spouse called {other.get_name()}"
