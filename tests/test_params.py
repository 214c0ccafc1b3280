"""Tests for query string serialization."""

from ajax_fetch import serialize_query_params


class TestFlatValues:
    """Tests for top-level scalar values."""

    def test_simple_pairs(self):
        assert serialize_query_params({"a": 1, "b": 2}) == "a=1&b=2"

    def test_empty_input(self):
        assert serialize_query_params({}) == ""

    def test_spaces_become_plus(self):
        assert serialize_query_params({"q": "a b"}) == "q=a+b"

    def test_none_becomes_empty(self):
        assert serialize_query_params({"a": None}) == "a="

    def test_callable_is_invoked(self):
        assert serialize_query_params({"a": lambda: "called"}) == "a=called"

    def test_callable_returning_none_is_null(self):
        assert serialize_query_params({"a": lambda: None}) == "a=null"

    def test_non_finite_floats(self):
        result = serialize_query_params(
            {"a": float("inf"), "b": float("-inf"), "c": float("nan")}
        )
        assert result == "a=Infinity&b=-Infinity&c=NaN"

    def test_large_and_small_floats(self):
        assert serialize_query_params({"n": 1e21}) == "n=1e%2B21"
        assert serialize_query_params({"n": 1e20}) == "n=100000000000000000000"
        assert serialize_query_params({"n": 1.5e-7}) == "n=1.5e-7"
        assert serialize_query_params({"n": 1e-5}) == "n=0.00001"

    def test_booleans_use_js_spelling(self):
        assert serialize_query_params({"t": True, "f": False}) == "t=true&f=false"

    def test_integral_float(self):
        assert serialize_query_params({"n": 2.0, "m": 2.5}) == "n=2&m=2.5"

    def test_reserved_characters_are_encoded(self):
        result = serialize_query_params({"a&b": "c=d/e?"})
        assert result == "a%26b=c%3Dd%2Fe%3F"

    def test_uri_component_safe_characters_untouched(self):
        assert serialize_query_params({"k": "-_.!~*'()"}) == "k=-_.!~*'()"

    def test_unicode_is_utf8_encoded(self):
        assert serialize_query_params({"name": "café"}) == "name=caf%C3%A9"


class TestNesting:
    """Tests for bracket notation on nested structures."""

    def test_scalar_array_uses_empty_brackets(self):
        assert serialize_query_params({"a": [1, 2]}) == "a%5B%5D=1&a%5B%5D=2"

    def test_nested_mapping(self):
        assert serialize_query_params({"a": {"b": 1}}) == "a%5Bb%5D=1"

    def test_deeply_nested_mapping(self):
        result = serialize_query_params({"a": {"b": {"c": "d"}}})
        assert result == "a%5Bb%5D%5Bc%5D=d"

    def test_array_of_objects_uses_indexes(self):
        result = serialize_query_params({"a": [{"b": 1}, {"c": 2}]})
        assert result == "a%5B0%5D%5Bb%5D=1&a%5B1%5D%5Bc%5D=2"

    def test_nested_arrays_use_indexes(self):
        result = serialize_query_params({"a": [[1, 2], [3]]})
        assert result == "a%5B0%5D%5B%5D=1&a%5B0%5D%5B%5D=2&a%5B1%5D%5B%5D=3"

    def test_none_in_array_is_indexed(self):
        result = serialize_query_params({"a": [None, 1]})
        assert result == "a%5B0%5D=&a%5B%5D=1"

    def test_prefix_ending_in_brackets_repeats_key(self):
        result = serialize_query_params({"ids[]": [1, 2]})
        assert result == "ids%5B%5D=1&ids%5B%5D=2"

    def test_prefix_ending_in_brackets_stringifies_objects(self):
        result = serialize_query_params({"ids[]": [[1, 2], {"x": 1}]})
        assert result == "ids%5B%5D=1%2C2&ids%5B%5D=%5Bobject+Object%5D"

    def test_empty_nested_containers_add_nothing(self):
        assert serialize_query_params({"a": {}, "b": [], "c": 1}) == "c=1"

    def test_mixed_structure(self):
        result = serialize_query_params(
            {"filter": {"tags": ["x", "y z"]}, "page": 2}
        )
        assert result == "filter%5Btags%5D%5B%5D=x&filter%5Btags%5D%5B%5D=y+z&page=2"


class TestTopLevelRecords:
    """Tests for a top-level list of name/value records."""

    def test_name_value_records(self):
        result = serialize_query_params(
            [{"name": "a", "value": "1"}, {"name": "b", "value": "x y"}]
        )
        assert result == "a=1&b=x+y"

    def test_record_without_value(self):
        assert serialize_query_params([{"name": "a"}]) == "a="

    def test_record_without_name(self):
        assert serialize_query_params([{"value": "1"}]) == "undefined=1"

    def test_scalar_list_has_undefined_names(self):
        assert serialize_query_params([1, 2]) == "undefined=&undefined="

    def test_record_objects_with_attributes(self):
        class Field:
            def __init__(self, name, value):
                self.name = name
                self.value = value

        assert serialize_query_params([Field("a", "1"), Field("b", None)]) == "a=1&b="

    def test_top_level_string_is_keyed_by_index(self):
        assert serialize_query_params("ab") == "0=a&1=b"

    def test_empty_list(self):
        assert serialize_query_params([]) == ""

    def test_none_input(self):
        assert serialize_query_params(None) == ""
