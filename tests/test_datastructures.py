# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for data structures.

These tests verify the datastructure classes defined in fluent_uri.datastructures.
Tests cover:
- parse_uri: variant selection and component parsing
- AbsoluteUri: ports, rendering, replace, immutability
- RelativeUri: text splitting
- QueryParams: read-only multi-valued view
"""

import pytest

from fluent_uri.datastructures import AbsoluteUri, QueryParams, RelativeUri, parse_uri
from fluent_uri.exceptions import InvalidArgument, MalformedResult


class TestParseUri:
    """Test parse_uri variant selection."""

    def test_parse_full_uri(self):
        """Absolute URI should expose every component."""
        uri = parse_uri("https://user:pw@Example.com:8080/p/a?x=1#frag")
        assert isinstance(uri, AbsoluteUri)
        assert uri.is_absolute
        assert uri.scheme == "https"
        assert uri.userinfo == "user:pw"
        assert uri.host == "Example.com"
        assert uri.explicit_port == 8080
        assert uri.path == "/p/a"
        assert uri.query == "x=1"
        assert uri.fragment == "frag"
        assert str(uri) == "https://user:pw@Example.com:8080/p/a?x=1#frag"

    def test_parse_without_path(self):
        """Absolute URI without path has an empty path."""
        uri = parse_uri("http://example.com")
        assert uri.path == ""
        assert str(uri) == "http://example.com"

    def test_parse_ipv6_host(self):
        """Bracketed IPv6 host should be kept with its brackets."""
        uri = parse_uri("http://[::1]:8080/x")
        assert uri.host == "[::1]"
        assert uri.port == 8080
        assert str(uri) == "http://[::1]:8080/x"

    def test_parse_relative_path(self):
        """Path-only URI should be relative."""
        uri = parse_uri("/search?q=1#top")
        assert isinstance(uri, RelativeUri)
        assert not uri.is_absolute
        assert uri.path == "/search"
        assert uri.query == "q=1"
        assert uri.fragment == "top"

    def test_scheme_without_authority_is_relative(self):
        """A scheme alone does not make a URI absolute."""
        uri = parse_uri("mailto:someone@example.com")
        assert isinstance(uri, RelativeUri)
        assert str(uri) == "mailto:someone@example.com"

    def test_existing_uri_returned_unchanged(self):
        """Parsing a Uri should return the same object."""
        uri = parse_uri("http://example.com")
        assert parse_uri(uri) is uri

    def test_none_rejected(self):
        """None should raise InvalidArgument."""
        with pytest.raises(InvalidArgument):
            parse_uri(None)

    def test_wrong_type_rejected(self):
        """Non-string input should raise InvalidArgument."""
        with pytest.raises(InvalidArgument):
            parse_uri(123)

    @pytest.mark.parametrize(
        "text",
        ["http://example.com:abc/", "http://example.com:99999/", "http://[::1/x", "http://:80/x"],
    )
    def test_malformed_authority(self, text):
        """Unparsable authority should raise MalformedResult."""
        with pytest.raises(MalformedResult):
            parse_uri(text)

    def test_malformed_port_chains_cause(self):
        """The urllib error should be chained."""
        with pytest.raises(MalformedResult) as exc_info:
            parse_uri("http://example.com:abc/")
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestAbsoluteUri:
    """Test AbsoluteUri class."""

    def test_default_port(self):
        """Port should fall back to the scheme default."""
        uri = parse_uri("http://example.com/x")
        assert uri.explicit_port is None
        assert uri.port == 80
        assert uri.is_default_port

    def test_explicit_default_port(self):
        """Explicit port equal to the default is still the default port."""
        uri = parse_uri("https://example.com:443/x")
        assert uri.explicit_port == 443
        assert uri.is_default_port
        assert str(uri) == "https://example.com:443/x"

    def test_non_default_port(self):
        """Explicit non-default port."""
        uri = parse_uri("http://example.com:8080/x")
        assert uri.port == 8080
        assert not uri.is_default_port

    def test_unknown_scheme_has_no_default_port(self):
        """Unknown scheme should have no default port."""
        uri = parse_uri("foo://example.com/x")
        assert uri.port is None
        assert uri.is_default_port

    def test_authority(self):
        """Authority should include userinfo and explicit port."""
        uri = parse_uri("http://u@example.com:81/")
        assert uri.authority == "u@example.com:81"

    def test_relative_path_rendered_with_slash(self):
        """A path without leading slash should be rendered with one."""
        uri = AbsoluteUri("http", "example.com", path="a/b")
        assert str(uri) == "http://example.com/a/b"

    def test_replace(self):
        """replace should return a new value and leave the original alone."""
        uri = parse_uri("http://example.com/x?a=1")
        other = uri.replace(host="other.org", query="")
        assert str(other) == "http://other.org/x"
        assert str(uri) == "http://example.com/x?a=1"

    def test_replace_unknown_component(self):
        """Unknown component names should raise TypeError."""
        uri = parse_uri("http://example.com/x")
        with pytest.raises(TypeError):
            uri.replace(password="secret")

    @pytest.mark.parametrize("host", ["", "bad host", "a/b", "a?b", "a#b", "a@b"])
    def test_invalid_host(self, host):
        """Invalid hosts should raise MalformedResult."""
        with pytest.raises(MalformedResult):
            AbsoluteUri("http", host)

    @pytest.mark.parametrize("scheme", ["", "1http", "ht tp", "http:"])
    def test_invalid_scheme(self, scheme):
        """Invalid schemes should raise MalformedResult."""
        with pytest.raises(MalformedResult):
            AbsoluteUri(scheme, "example.com")

    @pytest.mark.parametrize("port", [-1, 65536, "abc"])
    def test_invalid_port(self, port):
        """Out-of-range or non-numeric ports should raise MalformedResult."""
        with pytest.raises(MalformedResult):
            AbsoluteUri("http", "example.com", explicit_port=port)

    def test_immutable(self):
        """Attributes cannot be assigned."""
        uri = parse_uri("http://example.com/x")
        with pytest.raises(AttributeError):
            uri.host = "other.org"

    def test_repr(self):
        """repr should show the variant and the text."""
        r = repr(parse_uri("http://example.com"))
        assert "AbsoluteUri" in r
        assert "http://example.com" in r


class TestRelativeUri:
    """Test RelativeUri class."""

    def test_split_keeps_delimiters(self):
        """split parts should concatenate back to the text."""
        uri = RelativeUri("a/b?x=1#f")
        assert uri.split() == ("a/b", "?x=1", "#f")
        assert "".join(uri.split()) == "a/b?x=1#f"

    def test_question_mark_in_fragment(self):
        """A '?' after '#' belongs to the fragment."""
        uri = RelativeUri("/p#frag?x")
        assert uri.path == "/p"
        assert uri.query == ""
        assert uri.fragment == "frag?x"

    def test_empty(self):
        """Empty relative URI has empty components."""
        uri = RelativeUri("")
        assert uri.split() == ("", "", "")

    def test_immutable(self):
        """Attributes cannot be assigned."""
        uri = RelativeUri("/x")
        with pytest.raises(AttributeError):
            uri.text = "/y"


class TestUriEquality:
    """Test equality and hashing shared by both variants."""

    def test_equality_with_uri(self):
        """URIs with the same text are equal."""
        assert parse_uri("http://a.com/x") == parse_uri("http://a.com/x")
        assert parse_uri("http://a.com/x") != parse_uri("http://a.com/y")

    def test_equality_with_string(self):
        """URI should equal its text."""
        assert parse_uri("/x?a=1") == "/x?a=1"
        assert parse_uri("http://a.com") != "http://b.com"

    def test_equality_with_wrong_type(self):
        """URI should not equal incompatible types."""
        uri = parse_uri("http://a.com")
        assert uri != 123
        assert uri != ["http://a.com"]

    def test_hashable(self):
        """Equal URIs hash equal and deduplicate in sets."""
        uris = {parse_uri("http://a.com/x"), parse_uri("http://a.com/x"), parse_uri("/x")}
        assert len(uris) == 2

    def test_query_params(self):
        """query_params should parse the query component."""
        assert parse_uri("http://a.com/?t=1&t=2").query_params.getlist("t") == ["1", "2"]
        assert parse_uri("/x?q=a%20b").query_params["q"] == "a b"


class TestQueryParams:
    """Test QueryParams class."""

    def test_get(self):
        """get should return first value."""
        params = QueryParams("name=john&age=30")
        assert params.get("name") == "john"
        assert params.get("age") == "30"

    def test_get_default(self):
        """get should return default for missing key."""
        params = QueryParams("a=1")
        assert params.get("missing") is None
        assert params.get("missing", "default") == "default"

    def test_getlist(self):
        """getlist should return all values."""
        params = QueryParams("tag=a&tag=b&tag=c")
        assert params.getlist("tag") == ["a", "b", "c"]
        assert params.getlist("missing") == []

    def test_getlist_returns_copy(self):
        """Mutating the returned list should not change the params."""
        params = QueryParams("tag=a")
        params.getlist("tag").append("b")
        assert params.getlist("tag") == ["a"]

    def test_leading_question_mark(self):
        """Leading '?' should be ignored."""
        assert QueryParams("?a=1").get("a") == "1"

    def test_bytes_input(self):
        """Bytes should be decoded."""
        assert QueryParams(b"a=1&b=2").get("b") == "2"

    def test_url_decoding(self):
        """Values should be URL-decoded."""
        params = QueryParams("name=hello%20world&plus=a+b")
        assert params.get("name") == "hello world"
        assert params.get("plus") == "a b"

    def test_keys_values_items(self):
        """keys, values and items should follow first-seen order."""
        params = QueryParams("b=1&a=2&b=3")
        assert params.keys() == ["b", "a"]
        assert params.values() == ["1", "2"]
        assert params.items() == [("b", "1"), ("a", "2")]

    def test_multi_items(self):
        """multi_items should return every pair."""
        params = QueryParams("a=1&a=2&b=3")
        assert params.multi_items() == [("a", "1"), ("a", "2"), ("b", "3")]

    def test_as_dict(self):
        """as_dict should return a copy of the map."""
        params = QueryParams("a=1&a=2")
        data = params.as_dict()
        assert data == {"a": ["1", "2"]}
        data["a"].append("3")
        assert params.getlist("a") == ["1", "2"]

    def test_getitem(self):
        """Bracket access returns first value or raises KeyError."""
        params = QueryParams("a=1")
        assert params["a"] == "1"
        with pytest.raises(KeyError):
            params["missing"]

    def test_contains_len_bool(self):
        """Mapping dunders."""
        params = QueryParams("a=1&b=2")
        assert "a" in params
        assert "c" not in params
        assert 1 not in params
        assert len(params) == 2
        assert params
        assert not QueryParams("")

    def test_iter(self):
        """Iteration yields names."""
        assert list(QueryParams("a=1&b=2")) == ["a", "b"]

    def test_str(self):
        """str should give the canonical serialized form."""
        assert str(QueryParams("a=1&q=a+b")) == "a=1&q=a%20b"

    def test_repr(self):
        """repr should show the parsed map."""
        r = repr(QueryParams("a=1"))
        assert "QueryParams" in r
        assert "'a'" in r
