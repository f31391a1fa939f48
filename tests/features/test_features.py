"""
Tests for the registered features
"""

import pytest

from formulaops.features import FeatureRegistry, OperationResult


def test_version_feature_exists():
    """Test that the version feature is registered"""
    feature = FeatureRegistry.get_feature("version")
    assert feature is not None
    assert feature.name == "version"
    assert feature.description == "Get the formulaops version"


def test_version_feature_returns_valid_version():
    feature = FeatureRegistry.get_feature("version")
    result = feature.handler()

    assert result.success is True
    version = result.data["version"]
    assert isinstance(version, str)
    assert "." in version


def test_evaluate_feature_reports_values_and_formula_errors():
    feature = FeatureRegistry.get_feature("evaluate")

    result = feature.handler(symbol="/", operands=[9, 3])
    assert result.success is True
    assert result.data == {"symbol": "/", "value": 3, "error": None}

    result = feature.handler(symbol="/", operands=[9, 0])
    assert result.success is True
    assert result.data == {"symbol": "/", "value": None, "error": "#DIV/0!"}

    result = feature.handler(symbol="nope", operands=[1])
    assert result.success is True
    assert result.data["error"] == "#NAME?"


def test_evaluate_feature_propagates_unexpected_errors():
    feature = FeatureRegistry.get_feature("evaluate")
    with pytest.raises(AttributeError):
        feature.handler(symbol=None, operands=[1])


def test_list_operators_feature():
    result = FeatureRegistry.get_feature("list_operators").handler()
    assert result.success is True
    operators = result.data["operators"]
    assert operators["/"]["name"] == "divide"
    assert operators["/"]["min_args"] == 1
    assert operators["/"]["max_args"] is None
    assert operators["^"]["max_args"] == 2


def test_operation_result_helpers():
    assert OperationResult.ok({"a": 1}).success is True
    failed = OperationResult.fail("boom")
    assert failed.success is False
    assert failed.error == "boom"


if __name__ == "__main__":
    pytest.main([__file__])
