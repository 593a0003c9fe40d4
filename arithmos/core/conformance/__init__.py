"""
Conformance — объявления соответствия value types capabilities.
"""

from arithmos.core.conformance.declarations import (
    ConformanceDeclaration,
    capability_members,
    conforms,
    declarations_of,
    declared_capabilities,
    declares,
    missing_operations,
    require,
    required_operations,
    satisfies,
)

__all__ = [
    "ConformanceDeclaration",
    "conforms",
    "capability_members",
    "required_operations",
    "missing_operations",
    "satisfies",
    "require",
    "declarations_of",
    "declared_capabilities",
    "declares",
]
