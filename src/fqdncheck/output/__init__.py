"""Human-readable rendering of verdicts."""
