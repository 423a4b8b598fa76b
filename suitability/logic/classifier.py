"""
Classifier

Maps integer scores to suitability tiers:
- Excellent Fit (>= 85)
- Good Fit (>= 70)
- Average Fit (>= 55)
- Challenging (>= 40)
- Growth Opportunity (< 40)
"""

from typing import Dict, List

from .contracts import SuitabilityResult
from .constants import SuitabilityTier, TIER_THRESHOLDS


def classify_score(score: int) -> SuitabilityTier:
    """
    Classify a score into a tier.

    Args:
        score: Integer score in [0, 100]

    Returns:
        SuitabilityTier enum value
    """
    for tier, lower_bound in TIER_THRESHOLDS:
        if score >= lower_bound:
            return tier

    return SuitabilityTier.GROWTH_OPPORTUNITY


def bucket_by_tier(
    results: List[SuitabilityResult]
) -> Dict[SuitabilityTier, List[SuitabilityResult]]:
    """
    Group results by tier, keeping the incoming order inside each bucket.
    Every tier is present in the returned dict, possibly empty.
    """
    buckets: Dict[SuitabilityTier, List[SuitabilityResult]] = {
        tier: [] for tier in SuitabilityTier
    }
    for result in results:
        buckets[SuitabilityTier(result.tier)].append(result)
    return buckets


def get_tier_counts(results: List[SuitabilityResult]) -> Dict[str, int]:
    """
    Count results in each tier.
    """
    return {
        tier.value: len(bucket)
        for tier, bucket in bucket_by_tier(results).items()
    }
