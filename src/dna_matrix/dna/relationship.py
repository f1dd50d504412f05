"""Relationship estimation from shared centiMorgans.

Bands are checked from the highest threshold down and the first band whose
threshold the value meets or exceeds wins. Values below the lowest
threshold have no classifiable relationship.
"""
from __future__ import annotations

import math

from dna_matrix.models.relationship import Confidence, RelationshipEstimate


def _band(min_label: str, max_label: str, color: str, confidence: Confidence) -> RelationshipEstimate:
    return RelationshipEstimate(
        min_label=min_label,
        max_label=max_label,
        color=color,
        confidence=confidence,
    )


# (threshold_cm, estimate), sorted by threshold descending
RELATIONSHIP_BANDS: tuple[tuple[float, RelationshipEstimate], ...] = (
    (2600, _band("Parent", "Child", "#dc2626", Confidence.HIGH)),
    (1300, _band("Sibling", "Sibling", "#ea580c", Confidence.HIGH)),
    (680, _band("Grandparent", "Aunt/Uncle", "#d97706", Confidence.HIGH)),
    (200, _band("1st Cousin", "Great Aunt/Uncle", "#ca8a04", Confidence.HIGH)),
    (90, _band("2nd Cousin", "1st Cousin 1x Removed", "#65a30d", Confidence.MEDIUM)),
    (45, _band("3rd Cousin", "2nd Cousin 1x Removed", "#059669", Confidence.MEDIUM)),
    (20, _band("4th Cousin", "3rd Cousin 1x Removed", "#0891b2", Confidence.MEDIUM)),
    (10, _band("5th Cousin", "4th Cousin 1x Removed", "#3b82f6", Confidence.LOW)),
    (5, _band("6th Cousin", "Remote", "#6366f1", Confidence.LOW)),
)

MIN_CLASSIFIABLE_CM = RELATIONSHIP_BANDS[-1][0]


def classify_relationship(centimorgans: float) -> RelationshipEstimate | None:
    """Estimate the relationship range for a shared cM value.

    Args:
        centimorgans: Shared centiMorgans, zero or more

    Returns:
        The matching band, or None below MIN_CLASSIFIABLE_CM

    Raises:
        ValueError: If the value is negative or NaN
    """
    if math.isnan(centimorgans) or centimorgans < 0:
        raise ValueError(f"Shared centiMorgans must be zero or more, got {centimorgans}")

    for threshold, estimate in RELATIONSHIP_BANDS:
        if centimorgans >= threshold:
            return estimate
    return None


def relationship_legend() -> list[dict[str, str | float]]:
    """Colour legend entries, closest relationship first."""
    return [
        {
            "label": estimate.label,
            "color": estimate.color,
            "confidence": estimate.confidence.value,
            "min_cm": threshold,
        }
        for threshold, estimate in RELATIONSHIP_BANDS
    ]
