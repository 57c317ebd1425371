"""License policy analysis logic for license-policy."""
from license_policy.analysis.expression import (
    AndExpression,
    LicenseExpression,
    OrExpression,
    SingleLicense,
    check_expression,
    evaluate,
    parse_expression,
)
from license_policy.analysis.normalizer import LabelNormalizer, normalize_label
from license_policy.analysis.reconciler import combine_licenses, reconcile
from license_policy.analysis.validator import (
    get_used_licenses,
    validate_dependencies,
    validate_dependency,
)

__all__ = [
    "AndExpression",
    "LabelNormalizer",
    "LicenseExpression",
    "OrExpression",
    "SingleLicense",
    "check_expression",
    "combine_licenses",
    "evaluate",
    "get_used_licenses",
    "normalize_label",
    "parse_expression",
    "reconcile",
    "validate_dependencies",
    "validate_dependency",
]
