"""Tests for binding class and field naming."""

from unittest.mock import patch

import pytest

from bindgen.errors import MalformedIdentifierError
from bindgen.layout import LayoutNames


class TestLayoutNames:
    def test_binding_class_name(self):
        names = LayoutNames()
        assert names.binding_class_name("activity_main") == "ActivityMainBinding"
        assert names.binding_class_name("main") == "MainBinding"

    def test_custom_suffix(self):
        assert LayoutNames(class_suffix="Views").binding_class_name("list_item") == "ListItemViews"

    def test_field_name(self):
        names = LayoutNames()
        assert names.field_name("@+id/user_name") == "userName"
        assert names.field_name("@id/title") == "title"

    def test_malformed_view_id(self):
        names = LayoutNames()
        with pytest.raises(MalformedIdentifierError):
            names.field_name("user_name")

    def test_qualified_class_name(self):
        names = LayoutNames()
        assert (
            names.qualified_class_name("com.example.app", "activity_main")
            == "com.example.app.databinding.ActivityMainBinding"
        )
        assert names.qualified_class_name("", "activity_main") == "ActivityMainBinding"

    def test_names_are_memoized(self):
        names = LayoutNames()
        with patch("bindgen.layout.to_camel_case", side_effect=lambda name: "Converted") as convert:
            assert names.binding_class_name("activity_main") == "ConvertedBinding"
            assert names.binding_class_name("activity_main") == "ConvertedBinding"
            names.qualified_class_name("pkg", "activity_main")
        assert convert.call_count == 1

    def test_instances_do_not_share_caches(self):
        first = LayoutNames()
        second = LayoutNames(class_suffix="Holder")
        assert first.binding_class_name("row") == "RowBinding"
        assert second.binding_class_name("row") == "RowHolder"
