"""Human-readable verdict for an overall score."""

# (minimum score, label), first match wins
VERDICT_FLOORS = [(85, "Excellent"), (70, "Good"), (50, "Fair")]


def get_verdict(score: int) -> str:
    for floor, label in VERDICT_FLOORS:
        if score >= floor:
            return label
    return "Critical"
