"""
Basic package tests to ensure valdn can be imported and its API is exported.
"""

import valdn


def test_package_version():
    assert hasattr(valdn, '__version__')
    assert valdn.__version__ == "0.1.0"


def test_package_metadata():
    assert valdn.__license__ == "MIT"
    assert valdn.__author__ == "Patrik Mojzis"


def test_public_api_is_exported():
    for name in (
        "validate",
        "validate_value",
        "validate_struct",
        "validate_map",
        "validate_slice",
        "validate_json",
        "validate_request",
        "require_valid_request",
        "ValidationSession",
        "RuleRegistry",
        "ValidatorRule",
        "ValidationConfig",
        "ConfigurationException",
        "ValidationRuleException",
        "validates",
    ):
        assert hasattr(valdn, name), name
