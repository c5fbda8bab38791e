"""Bayesian rating adjustment."""


def bayesian_rating(rating: float, vote_count: float, m: float, C: float) -> float:
    """Shrink a rating toward the prior mean ``C`` until it has ~``m`` votes.

    Formula: (v/(v+m))*R + (m/(v+m))*C. A venue with no votes gets exactly C.
    Inputs are not clamped.
    """
    if vote_count == 0:
        return C
    return (vote_count / (vote_count + m)) * rating + (m / (vote_count + m)) * C
