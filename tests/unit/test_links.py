"""Unit tests for Safe Links unwrapping."""

from mailmark.text.links import decode_component, unwrap_safe_links

WRAPPED = "https://na01.safelinks.protection.outlook.com/?url=https%3A%2F%2Fexample.com%2Fpage&data=abc123&reserved=0"


class TestUnwrap:
    def test_bare_url(self):
        assert unwrap_safe_links(WRAPPED) == "https://example.com/page"

    def test_inside_markdown_link(self):
        assert unwrap_safe_links(f"[Click here]({WRAPPED})") == "[Click here](https://example.com/page)"

    def test_in_running_text(self):
        text = "Visit https://eur01.safelinks.protection.outlook.com/?url=https%3A%2F%2Fgoogle.com&data=xyz today"
        assert unwrap_safe_links(text) == "Visit https://google.com today"

    def test_without_extra_parameters(self):
        text = "https://nam12.safelinks.protection.outlook.com/?url=https%3A%2F%2Fexample.org"
        assert unwrap_safe_links(text) == "https://example.org"

    def test_host_case_insensitive(self):
        text = "HTTPS://EUR02.SAFELINKS.PROTECTION.OUTLOOK.COM/?url=https%3A%2F%2Fexample.com&data=1"
        assert unwrap_safe_links(text) == "https://example.com"

    def test_query_in_destination(self):
        text = "https://na01.safelinks.protection.outlook.com/?url=https%3A%2F%2Fexample.com%2F%3Fq%3D1%26r%3D2&data=x"
        assert unwrap_safe_links(text) == "https://example.com/?q=1&r=2"

    def test_other_urls_untouched(self):
        text = "https://example.com/?url=https%3A%2F%2Fother.com"
        assert unwrap_safe_links(text) == text


class TestMalformed:
    def test_truncated_escape_kept(self):
        text = "https://na01.safelinks.protection.outlook.com/?url=https%3A%2F%2Fexample.com%2F%E0%A4%A&data=x"
        assert unwrap_safe_links(text) == text

    def test_invalid_utf8_kept(self):
        text = "https://na01.safelinks.protection.outlook.com/?url=https%3A%2F%2Fexample.com%2F%FF&data=x"
        assert unwrap_safe_links(text) == text


class TestDecodeComponent:
    def test_valid(self):
        assert decode_component("https%3A%2F%2Fexample.com") == "https://example.com"

    def test_plus_is_not_space(self):
        assert decode_component("a+b") == "a+b"

    def test_bad_escape(self):
        assert decode_component("100%zz") is None

    def test_invalid_bytes(self):
        assert decode_component("%C3%28") is None
