from ..utils.types import Severity

# Gap thresholds on the 1-5 level scale
CRITICAL_GAP = 2
MODERATE_GAP = 1


def classify_gap(gap: float) -> Severity:
    """Presentation-only bucket for a positive skill gap."""
    if gap >= CRITICAL_GAP:
        return "critical"
    if gap >= MODERATE_GAP:
        return "moderate"
    return "low"
