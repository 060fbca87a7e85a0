#!/usr/bin/env python3
"""
Tests for the case conversions, namespace helpers and naming filters.
"""

import pytest

from json_schema_to_value_objects.pipeline import NameFilters
from json_schema_to_value_objects.utils import (
    join_namespace,
    namespace_to_path,
    snake_to_pascal_case,
    to_screaming_snake_case,
    to_snake_case,
)


class TestCaseConversions:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("first_name", "FirstName"),
            ("FIRST_NAME", "FirstName"),
            ("billingAddress", "BillingAddress"),
            ("BCP 47", "Bcp47"),
            ("invalid_status", "InvalidStatus"),
            ("", ""),
        ],
    )
    def test_pascal_case(self, text, expected):
        assert snake_to_pascal_case(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("billingAddress", "billing_address"),
            ("dateTime", "date_time"),
            ("in-progress", "in_progress"),
            ("HTTPServer", "http_server"),
            ("class", "class_"),
        ],
    )
    def test_snake_case(self, text, expected):
        assert to_snake_case(text) == expected

    def test_screaming_snake_case(self):
        assert to_screaming_snake_case("in-progress") == "IN_PROGRESS"
        assert to_screaming_snake_case("billingAddress") == "BILLING_ADDRESS"

    def test_leading_digit(self):
        """Identifiers never start with a digit"""
        assert to_screaming_snake_case("1st") == "_1_ST"


class TestNamespaces:
    def test_namespace_to_path(self):
        assert namespace_to_path("acme.exception") == "acme/exception"
        assert namespace_to_path("acme") == "acme"

    def test_join_namespace(self):
        """Empty segments are skipped, slashes separate segments"""
        assert join_namespace("acme", "shared") == "acme.shared"
        assert join_namespace("", "shared") == "shared"
        assert join_namespace("acme", "shared/geo") == "acme.shared.geo"
        assert join_namespace("acme", "Shared\\Geo") == "acme.Shared.Geo"


class TestNameFilters:
    def test_defaults(self):
        filters = NameFilters()

        assert filters.class_name("createdAt") == "CreatedAt"
        assert filters.property_name("createdAt") == "created_at"
        assert filters.method_name("for_status") == "for_status"
        assert filters.const_name("in-progress") == "IN_PROGRESS"
        assert filters.const_value("in-progress") == "in_progress"

    def test_custom_filter(self):
        """Filters are pluggable"""
        filters = NameFilters(class_name=lambda name: "Vo" + snake_to_pascal_case(name))

        assert filters.class_name("email") == "VoEmail"


if __name__ == "__main__":
    pytest.main([__file__])
