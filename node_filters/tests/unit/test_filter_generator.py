"""
Unit tests for the filter type generator.

Tests the operator sets, scalar types, names and pruning of the filter types
generated for each shape of sample value.
"""

import graphene
import pytest

from node_filters.core.settings import FilteringSettings
from node_filters.filters.exceptions import FilterNamingError
from node_filters.filters import (
    FilterTypeGenerator,
    InputFilterObjectType,
    InputFilterReferenceType,
    OPERATOR_DESCRIPTIONS,
    Reference,
    create_filter_type,
    create_filter_types,
    is_reference_filter,
    is_value_filter,
)

pytestmark = pytest.mark.unit


def field_names(filter_type):
    return set(filter_type._meta.fields)


def field_type(filter_type, name):
    return filter_type._meta.fields[name].type


def assert_list_of(filter_type, name, scalar):
    list_type = field_type(filter_type, name)
    assert isinstance(list_type, graphene.List)
    assert list_type.of_type is scalar


@pytest.fixture
def generator():
    return FilterTypeGenerator(FilteringSettings())


class TestStringFilter:
    def test_operators_and_types(self, generator):
        filter_type = generator.create_filter_type("Hello", "title", "Post")

        assert field_names(filter_type) == {"len", "eq", "ne", "regex", "in", "nin"}
        assert field_type(filter_type, "len") is graphene.Int
        for name in ("eq", "ne", "regex"):
            assert field_type(filter_type, name) is graphene.String
        assert_list_of(filter_type, "in", graphene.String)
        assert_list_of(filter_type, "nin", graphene.String)

    def test_name_and_description(self, generator):
        filter_type = generator.create_filter_type("Hello", "title", "Post")

        assert filter_type._meta.name == "PostTitleInputFilter"
        assert filter_type._meta.description == "Filter Post nodes by title"
        assert issubclass(filter_type, InputFilterObjectType)

    def test_operator_descriptions(self, generator):
        filter_type = generator.create_filter_type("Hello", "title", "Post")
        fields = filter_type._meta.fields

        assert fields["regex"].description == OPERATOR_DESCRIPTIONS["regex"]
        assert fields["len"].description == OPERATOR_DESCRIPTIONS["len"]


class TestBooleanFilter:
    def test_operators_and_types(self, generator):
        filter_type = generator.create_filter_type(True, "published", "Post")

        assert field_names(filter_type) == {"eq", "ne", "in", "nin"}
        assert field_type(filter_type, "eq") is graphene.Boolean
        assert field_type(filter_type, "ne") is graphene.Boolean
        assert_list_of(filter_type, "in", graphene.Boolean)
        assert_list_of(filter_type, "nin", graphene.Boolean)

    def test_no_descriptions(self, generator):
        filter_type = generator.create_filter_type(False, "published", "Post")

        assert filter_type._meta.description is None
        for field in filter_type._meta.fields.values():
            assert field.description is None


class TestNumberFilter:
    @pytest.mark.parametrize("value", [42, -7, 0, 2147483647, 5.0])
    def test_int_values(self, generator, value):
        filter_type = generator.create_filter_type(value, "views", "Post")
        self._assert_numeric(filter_type, graphene.Int)

    @pytest.mark.parametrize("value", [3.14, 2147483648, -2147483649, 1e100])
    def test_float_values(self, generator, value):
        filter_type = generator.create_filter_type(value, "rating", "Post")
        self._assert_numeric(filter_type, graphene.Float)

    def _assert_numeric(self, filter_type, scalar):
        assert field_names(filter_type) == {
            "eq", "ne", "gt", "gte", "lt", "lte", "in", "nin", "between",
        }
        for name in ("eq", "ne", "gt", "gte", "lt", "lte"):
            assert field_type(filter_type, name) is scalar
        for name in ("in", "nin", "between"):
            assert_list_of(filter_type, name, scalar)


class TestDateFilter:
    @pytest.mark.parametrize("value", ["2021-05-01", "2021-05-01T10:30:00.000Z"])
    def test_operators_and_types(self, generator, value):
        filter_type = generator.create_filter_type(value, "date", "Post")

        assert field_names(filter_type) == {"dteq", "gt", "gte", "lt", "lte", "between"}
        for name in ("dteq", "gt", "gte", "lt", "lte"):
            assert field_type(filter_type, name) is graphene.String
        assert_list_of(filter_type, "between", graphene.String)
        assert is_value_filter(filter_type)


class TestListFilter:
    def test_string_elements(self, generator):
        filter_type = generator.create_filter_type(["a", "b"], "keywords", "Post")

        assert field_names(filter_type) == {
            "size", "contains", "containsAny", "containsNone",
        }
        assert field_type(filter_type, "size") is graphene.Int
        for name in ("contains", "containsAny", "containsNone"):
            assert_list_of(filter_type, name, graphene.String)

    def test_first_element_decides_type(self, generator):
        filter_type = generator.create_filter_type([1, "a"], "scores", "Post")
        assert_list_of(filter_type, "contains", graphene.Int)

        filter_type = generator.create_filter_type([1.5, 2], "weights", "Post")
        assert_list_of(filter_type, "containsAny", graphene.Float)

    @pytest.mark.parametrize(
        "value", [[], [{"name": "x"}], [["a"]], [None]]
    )
    def test_unsupported_elements_drop_the_field(self, generator, value):
        assert generator.create_filter_type(value, "items", "Post") is None


class TestReferenceFilter:
    def test_single_reference(self, generator):
        filter_type = generator.create_filter_type(
            {"typeName": "Author", "isList": False}, "author", "Post"
        )

        assert field_names(filter_type) == {"eq", "ne", "regex", "in", "nin"}
        for name in ("eq", "ne", "regex"):
            assert field_type(filter_type, name) is graphene.String
        assert_list_of(filter_type, "in", graphene.String)
        assert_list_of(filter_type, "nin", graphene.String)
        assert issubclass(filter_type, InputFilterReferenceType)
        assert is_reference_filter(filter_type)
        assert not is_value_filter(filter_type)

    def test_list_reference(self, generator):
        filter_type = generator.create_filter_type(
            {"typeName": "Tag", "isList": True}, "tags", "Post"
        )

        assert field_names(filter_type) == {
            "size", "contains", "containsAny", "containsNone",
        }
        assert field_type(filter_type, "size") is graphene.Int
        assert_list_of(filter_type, "contains", graphene.String)
        assert filter_type._meta.name == "PostTagsInputFilter"
        assert is_reference_filter(filter_type)

    def test_tagged_reference(self, generator):
        filter_type = generator.create_filter_type(
            Reference("Tag", is_list=True), "tags", "Post"
        )
        assert "containsNone" in field_names(filter_type)
        assert is_reference_filter(filter_type)

    def test_reference_is_not_treated_as_object(self, generator):
        filter_type = generator.create_filter_type(
            {"typeName": "Author", "isList": False}, "author", "Post"
        )
        assert "typeName" not in field_names(filter_type)
        assert "isList" not in field_names(filter_type)


class TestObjectFilter:
    def test_nested_fields(self, generator):
        filter_type = generator.create_filter_type(
            {"name": "Jane", "age": 30}, "author", "Post"
        )

        assert field_names(filter_type) == {"name", "age"}
        assert filter_type._meta.name == "PostAuthorInputFilter"
        assert filter_type._meta.description is None
        assert not is_value_filter(filter_type)
        assert not is_reference_filter(filter_type)

        name_filter = field_type(filter_type, "name")
        assert name_filter._meta.name == "PostAuthorNameInputFilter"
        assert name_filter._meta.description == "Filter Post nodes by author name"
        assert field_type(name_filter, "eq") is graphene.String

    def test_deeply_nested_names_carry_ancestry(self, generator):
        filter_type = generator.create_filter_type(
            {"address": {"city": "Paris"}}, "author", "Post"
        )
        address_filter = field_type(filter_type, "address")
        city_filter = field_type(address_filter, "city")

        assert address_filter._meta.name == "PostAuthorAddressInputFilter"
        assert city_filter._meta.name == "PostAuthorAddressCityInputFilter"

    def test_unsupported_children_are_skipped(self, generator):
        filter_type = generator.create_filter_type(
            {"a": "x", "b": None, "c": object()}, "meta", "Post"
        )
        assert field_names(filter_type) == {"a"}

    def test_all_unsupported_children_prune_the_object(self, generator):
        assert generator.create_filter_type({"b": None}, "meta", "Post") is None
        assert generator.create_filter_type({}, "meta", "Post") is None

    def test_objects_of_empty_objects_are_pruned(self, generator):
        value = {"inner": {"deeper": {}}, "items": []}
        assert generator.create_filter_type(value, "meta", "Post") is None

    def test_nested_references_keep_marker(self, generator):
        filter_type = generator.create_filter_type(
            {"editor": {"typeName": "Author", "isList": False}}, "meta", "Post"
        )
        assert is_reference_filter(field_type(filter_type, "editor"))

    def test_reserved_attribute_names_keep_exposed_name(self, generator):
        filter_type = generator.create_filter_type({"Meta": "x"}, "info", "Post")
        fields = filter_type._meta.fields

        assert "Meta_" in fields
        assert fields["Meta_"].name == "Meta"

    def test_nested_fields_pin_exposed_names(self, generator):
        filter_type = generator.create_filter_type(
            {"published_at": "x", "view_count": 3}, "meta", "Post"
        )
        fields = filter_type._meta.fields

        assert fields["published_at"].name == "published_at"
        assert fields["view_count"].name == "view_count"

    def test_space_separated_field_name_is_a_path(self, generator):
        filter_type = generator.create_filter_type("x", "author name", "Post")
        assert filter_type._meta.name == "PostAuthorNameInputFilter"
        assert filter_type._meta.description == "Filter Post nodes by author name"


class TestUnsupportedValues:
    @pytest.mark.parametrize("value", [None, object(), len, b"raw"])
    def test_returns_none(self, generator, value):
        assert generator.create_filter_type(value, "field", "Post") is None


class TestCreateFilterTypes:
    SAMPLE = {
        "title": "Hello",
        "views": 42,
        "published": True,
        "date": "2021-05-01",
        "keywords": ["a"],
        "author": {"typeName": "Author", "isList": False},
        "tags": {"typeName": "Tag", "isList": True},
        "meta": {"source": "web", "ignored": None},
        "empty": {},
        "items": [{"a": 1}],
        "missing": None,
    }

    def test_unfilterable_fields_are_omitted(self, generator):
        filters = generator.create_filter_types(self.SAMPLE, "Post")

        assert set(filters) == {
            "title", "views", "published", "date", "keywords", "author", "tags", "meta",
        }

    def test_entries_expose_type(self, generator):
        filters = generator.create_filter_types(self.SAMPLE, "Post")

        assert isinstance(filters["title"], graphene.InputField)
        assert filters["title"].type._meta.name == "PostTitleInputFilter"
        assert filters["meta"].type._meta.name == "PostMetaInputFilter"

    def test_names_are_unique(self, generator):
        filters = generator.create_filter_types(self.SAMPLE, "Post")
        names = [entry.type._meta.name for entry in filters.values()]
        names.append(filters["meta"].type._meta.fields["source"].type._meta.name)

        assert len(names) == len(set(names))

    def test_repeated_generation_is_identical(self, generator):
        first = generator.create_filter_types(self.SAMPLE, "Post")
        second = generator.create_filter_types(self.SAMPLE, "Post")

        assert list(first) == list(second)
        for key in first:
            first_type, second_type = first[key].type, second[key].type
            assert first_type._meta.name == second_type._meta.name
            assert list(first_type._meta.fields) == list(second_type._meta.fields)

    def test_empty_fields(self, generator):
        assert generator.create_filter_types({}, "Post") == {}

    def test_entries_pin_field_names(self, generator):
        filters = generator.create_filter_types({"view_count": 3}, "Post")
        assert filters["view_count"].name == "view_count"

    @pytest.mark.parametrize(
        "fields",
        [
            {"author": {"name": "x"}, "authorName": 5},
            {"author_name": "x", "authorName": "y"},
            {"meta": {"author": {"name": "x"}, "authorName": "y"}},
        ],
    )
    def test_colliding_type_names_raise(self, generator, fields):
        with pytest.raises(FilterNamingError) as exc_info:
            generator.create_filter_types(fields, "Post")

        assert "AuthorNameInputFilter" in str(exc_info.value)
        assert exc_info.value.type_name == "Post"

    def test_colliding_type_names_raise_for_filter_input(self, generator):
        with pytest.raises(FilterNamingError):
            generator.create_filter_input(
                {"author": {"name": "x"}, "authorName": 5}, "Post"
            )

    def test_module_helpers_use_project_settings(self):
        filters = create_filter_types({"title": "Hello"}, "Post")
        assert filters["title"].type._meta.name == "PostTitleInputFilter"
        assert create_filter_type(None, "title", "Post") is None


class TestSettings:
    def test_custom_suffix(self):
        generator = FilterTypeGenerator(FilteringSettings(type_name_suffix="Filter"))
        filter_type = generator.create_filter_type("x", "title", "Post")
        assert filter_type._meta.name == "PostTitleFilter"

    def test_descriptions_disabled(self):
        generator = FilterTypeGenerator(FilteringSettings(generate_descriptions=False))
        filter_type = generator.create_filter_type(1, "views", "Post")

        assert filter_type._meta.description is None
        assert filter_type._meta.fields["eq"].description is None

    @pytest.mark.parametrize(
        "max_depth, expected",
        [(None, {"a", "b"}), (2, {"a", "b"}), (1, {"a"})],
    )
    def test_max_nested_depth(self, max_depth, expected):
        generator = FilterTypeGenerator(FilteringSettings(max_nested_depth=max_depth))
        filter_type = generator.create_filter_type(
            {"a": "x", "b": {"c": "y"}}, "meta", "Post"
        )
        assert field_names(filter_type) == expected

    def test_zero_depth_prunes_objects(self):
        generator = FilterTypeGenerator(FilteringSettings(max_nested_depth=0))
        filters = generator.create_filter_types({"meta": {"a": "x"}, "t": "x"}, "Post")
        assert set(filters) == {"t"}
