"""Transport security scoring.

Rewards a page that was requested over the secure transport
and never loaded a subresource insecurely.
"""

from __future__ import annotations

from privacy_grade.config import GradingConfig
from privacy_grade.models import analysis


def calculate(
    https: bool,
    has_only_secure_content: bool,
    config: GradingConfig,
) -> analysis.TermScore:
    """Score the page's transport security.

    Args:
        https: Whether the page URL uses the secure scheme.
        has_only_secure_content: False once any subresource
            loaded over the insecure transport.
        config: Grading weights.

    Returns:
        TermScore with ``-secure_bonus`` points for a fully
        secure page, otherwise zero points and an issue.
    """
    if https and has_only_secure_content:
        return analysis.TermScore(points=-config.secure_bonus)
    if https:
        return analysis.TermScore(points=0, issues=["Page loaded insecure (mixed) content"])
    return analysis.TermScore(points=0, issues=["Page is not served over an encrypted connection"])
