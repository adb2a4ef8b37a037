"""Leaf evaluators: readiness, fatigue and workout compatibility."""

from coaching_engine.rules.compatibility import check_constraint_compatibility
from coaching_engine.rules.fatigue import assess_fatigue
from coaching_engine.rules.readiness import assess_readiness, classify_readiness

__all__ = [
    "assess_fatigue",
    "assess_readiness",
    "check_constraint_compatibility",
    "classify_readiness",
]
