"""Error aggregation across one whole build call."""

from __future__ import annotations

from collections import defaultdict

from loguru import logger

from proptree.errors import PropertyBuildError, PropertyError


class PropertyErrorAggregator:
    """Collects per-property problems so a build reports all of them at once.

    Usage:
        errors = PropertyErrorAggregator()
        errors.add("count", DuplicateMember(...))
        errors.raise_if_errors(Root)  # raises PropertyBuildError
    """

    def __init__(self) -> None:
        self._errors: defaultdict[str, list[PropertyError]] = defaultdict(list)

    def add(self, property_name: str, error: PropertyError) -> None:
        logger.error("[P: {}] {}", property_name, error)
        self._errors[property_name].append(error)

    def raise_if_errors(self, base_type: type) -> None:
        """Raise one aggregate error if anything was collected.

        Raises:
            PropertyBuildError: Listing every offending property.
        """
        if self._errors:
            raise PropertyBuildError(base_type, self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __len__(self) -> int:
        return sum(len(errors) for errors in self._errors.values())
