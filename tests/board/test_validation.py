"""Tests for fact input validation."""

import pytest

from board.validation import MAX_FACT_LENGTH, is_valid_fact_input, is_valid_url


class TestIsValidUrl:
    def test_https_url(self):
        assert is_valid_url("https://example.com") is True

    def test_http_url_with_path(self):
        assert is_valid_url("http://example.com/a/b?c=1") is True

    def test_not_a_url(self):
        assert is_valid_url("not a url") is False

    def test_ftp_rejected(self):
        assert is_valid_url("ftp://example.com") is False

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "https://",
            "javascript:alert(1)",
            "http://example.com:notaport",
            "http://[::1",
            "https://not a url",
            "https://exa mple.com/x",
            "http://a<b>.com",
            "http://a{b}.com",
        ],
    )
    def test_malformed_never_raises(self, value):
        assert is_valid_url(value) is False

    def test_space_in_path_allowed(self):
        assert is_valid_url("https://example.com/a b") is True

    def test_unicode_host(self):
        assert is_valid_url("https://münchen.de/") is True

    def test_non_string(self):
        assert is_valid_url(None) is False


class TestIsValidFactInput:
    def test_valid(self):
        assert is_valid_fact_input("Water boils at 100C", "https://x.com", "science") is True

    def test_empty_text_rejected(self):
        assert is_valid_fact_input("", "https://x.com", "science") is False

    def test_length_boundary(self):
        assert MAX_FACT_LENGTH == 200
        assert is_valid_fact_input("a" * 200, "https://x.com", "science") is True
        assert is_valid_fact_input("a" * 201, "https://x.com", "science") is False

    def test_bad_source_rejected(self):
        assert is_valid_fact_input("fact", "x.com", "science") is False

    def test_empty_category_rejected(self):
        assert is_valid_fact_input("fact", "https://x.com", "") is False

    def test_unknown_category_rejected(self):
        assert is_valid_fact_input("fact", "https://x.com", "astrology") is False
