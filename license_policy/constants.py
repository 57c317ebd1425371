"""Constants for license-policy."""

# Exit codes
EXIT_SUCCESS = 0  # No violations found
EXIT_VIOLATIONS = 1  # Policy violations found
EXIT_ERROR = 2  # Check failed due to error

# Literal separators of the supported license expression grammar
OR_SEPARATOR = " OR "
AND_SEPARATOR = " AND "

# Location of the Gradle dependency-license report inside a module directory
GRADLE_LICENSE_REPORT = ("build", "reports", "dependency-license", "license-details.json")

# Legal disclaimer shown alongside reports
LEGAL_DISCLAIMER = (
    "This tool checks declared dependency licenses against a configured policy "
    "for informational purposes only. It does not constitute legal advice."
)
