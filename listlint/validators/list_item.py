"""Validation of every entry of a markdown list."""

from __future__ import annotations

from typing import Iterable, Optional

from ..identifiers import IdentifierAllowList
from ..logging import get_logger
from ..models import Node
from .base import Reporter
from .description import DescriptionValidator
from .entry import EntryStatus, decompose_entry
from .link import LinkValidator


class ListItemValidator:
    """Runs decomposition, link and description checks on each list entry.

    The first failing check of an entry reports one diagnostic and ends the
    checks for that entry; the remaining entries are still validated.
    """

    def __init__(
        self,
        identifiers: Optional[IdentifierAllowList] = None,
        *,
        link_validator: LinkValidator | None = None,
        description_validator: DescriptionValidator | None = None,
    ) -> None:
        self.link_validator = link_validator or LinkValidator()
        self.description_validator = description_validator or DescriptionValidator(identifiers)
        self.logger = get_logger("validators.list_item")

    def validate_lists(self, lists: Iterable[Node], reporter: Reporter) -> None:
        for list_node in lists:
            self.validate_list(list_node, reporter)

    def validate_list(self, list_node: Node, reporter: Reporter) -> None:
        self.logger.debug(
            "Validating list with %d entries (line %s)", len(list_node.children), list_node.line
        )
        for item in list_node.children:
            self.validate_entry(item, reporter)

    def validate_entry(self, item: Node, reporter: Reporter) -> bool:
        entry = decompose_entry(item, reporter)
        if entry.status is EntryStatus.INVALID:
            return False
        # Exempt entries carry no link.
        if entry.link is None:
            return True

        if not self.link_validator.validate(entry.link, reporter):
            return False
        return self.description_validator.validate(entry.description, reporter)


__all__ = ["ListItemValidator"]
