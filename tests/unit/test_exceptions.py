"""Unit tests for the error hierarchy."""

import pytest

from sql_metamodel.exceptions import (
    BindingError,
    ConfigurationError,
    MetamodelError,
    NamingConventionError,
    ShapeMismatchError,
)


@pytest.mark.unit
class TestToDict:
    def test_configuration_error(self):
        data = ConfigurationError("bad graph").to_dict()
        assert data == {"error_type": "ConfigurationError", "message": "bad graph"}

    def test_binding_error_carries_column(self):
        data = BindingError("unbound", column="Toto.A").to_dict()
        assert data["column"] == "Toto.A"

    def test_shape_mismatch_carries_shapes(self):
        error = ShapeMismatchError("getA", "msg", expected="0 parameters", actual="1 parameter(s)")
        data = error.to_dict()
        assert data["accessor_name"] == "getA"
        assert data["expected"] == "0 parameters"
        assert data["actual"] == "1 parameter(s)"

    def test_all_errors_share_base(self):
        for error in (
            ConfigurationError("x"),
            BindingError("x"),
            NamingConventionError("a", "x"),
        ):
            assert isinstance(error, MetamodelError)
