"""
Domain service: companion-planting analysis of the current plan.

Every placed plant is compared with every other placed plant on the whole
grid, not just plants sharing a cell. This is quadratic in the number of
placed plants, which is acceptable for plans bounded by realistic land
sizes.
"""
from itertools import combinations
from typing import Sequence, Set
import logging

from forest_planner.domain.models import (
    CompatibilityFinding,
    CompatibilityRelation,
    CompatibilityReport,
    SpeciesRecord,
)

logger = logging.getLogger(__name__)


def classify_pair(a: SpeciesRecord, b: SpeciesRecord) -> CompatibilityRelation:
    """
    Classify two species as companions or not.

    Companion listings may be one-sided, so either direction is enough.

    Args:
        a: First species
        b: Second species

    Returns:
        COMPATIBLE if either lists the other, INDETERMINATE otherwise
    """
    if b.name in a.companions or a.name in b.companions:
        return CompatibilityRelation.COMPATIBLE
    return CompatibilityRelation.INDETERMINATE


class CompatibilityAnalyzer:
    """Derives pairwise findings and companion suggestions from placed plants."""

    def analyze(self, placed: Sequence[SpeciesRecord]) -> CompatibilityReport:
        """
        Classify every unordered pair of placed plant instances.

        Duplicate plantings of the same species are separate instances, so
        two Mangos produce a Mango/Mango pair.

        Args:
            placed: All placed plant instances, in grid order

        Returns:
            CompatibilityReport with compatible and indeterminate pairs
        """
        report = CompatibilityReport()

        for a, b in combinations(placed, 2):
            relation = classify_pair(a, b)
            finding = CompatibilityFinding(species_a=a.name, species_b=b.name, relation=relation)
            if relation == CompatibilityRelation.COMPATIBLE:
                report.compatible.append(finding)
            else:
                report.indeterminate.append(finding)

        logger.debug(f"Compatibility: {len(report.compatible)} compatible, "
                     f"{len(report.indeterminate)} indeterminate pairs from {len(placed)} plants")
        return report

    def suggest_companions(self, placed: Sequence[SpeciesRecord]) -> Set[str]:
        """
        Companion names of placed plants that are not planted yet.

        Args:
            placed: All placed plant instances

        Returns:
            Unordered set of suggested species names
        """
        placed_names = {s.name for s in placed}
        suggestions: Set[str] = set()

        for species in placed:
            for companion in species.companions:
                if companion not in placed_names:
                    suggestions.add(companion)

        return suggestions
