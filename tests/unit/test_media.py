"""Unit tests for media URL extraction."""

import time

from mailmark.convert.media import extract_media_urls


class TestPairedElements:
    def test_iframe(self):
        html = '<iframe src="https://youtube.com/embed/xyz"></iframe>'
        assert extract_media_urls(html) == "<p>https://youtube.com/embed/xyz</p>"

    def test_video_with_fallback_content(self):
        html = '<video src="https://example.com/v.mp4">Your client cannot play this</video>'
        assert extract_media_urls(html) == "<p>https://example.com/v.mp4</p>"

    def test_audio_single_quotes(self):
        html = "<audio controls src='https://example.com/a.mp3'></audio>"
        assert extract_media_urls(html) == "<p>https://example.com/a.mp3</p>"

    def test_object_uses_data_attribute(self):
        html = '<object type="application/pdf" data="https://example.com/doc.pdf"><p>fallback</p></object>'
        assert extract_media_urls(html) == "<p>https://example.com/doc.pdf</p>"

    def test_attribute_order_does_not_matter(self):
        html = '<iframe width="560" height="315" src="https://a.test/v" frameborder="0"></iframe>'
        assert extract_media_urls(html) == "<p>https://a.test/v</p>"

    def test_case_insensitive(self):
        html = '<IFRAME SRC="https://a.test/"></IFRAME>'
        assert extract_media_urls(html) == "<p>https://a.test/</p>"


class TestSelfClosingElements:
    def test_video(self):
        html = '<video src="https://example.com/v.mp4" controls />'
        assert extract_media_urls(html) == "<p>https://example.com/v.mp4</p>"

    def test_embed_void(self):
        html = '<embed src="https://example.com/x.swf" type="application/x-shockwave-flash">'
        assert extract_media_urls(html) == "<p>https://example.com/x.swf</p>"

    def test_self_closing_followed_by_paired(self):
        html = '<iframe src="https://a.test/1"/><iframe src="https://a.test/2"></iframe>'
        assert extract_media_urls(html) == "<p>https://a.test/1</p><p>https://a.test/2</p>"


class TestLeftUntouched:
    def test_no_address_attribute(self):
        html = '<video controls><source src="clip.mp4"></video>'
        assert extract_media_urls(html) == html

    def test_prefixed_attribute_is_not_the_address(self):
        html = '<iframe data-src="https://lazy.test/"></iframe>'
        assert extract_media_urls(html) == html

    def test_unquoted_address(self):
        html = "<iframe src=https://a.test/></iframe>"
        assert extract_media_urls(html) == html

    def test_surrounding_markup_preserved(self):
        html = '<p>Watch:</p><video src="v.mp4"></video><p>now</p>'
        assert extract_media_urls(html) == "<p>Watch:</p><p>v.mp4</p><p>now</p>"

    def test_plain_text(self):
        assert extract_media_urls("no media here") == "no media here"


class TestMalformedInput:
    def test_unclosed_tags_left_alone(self):
        html = '<iframe src="https://v.test/x">' * 50
        assert extract_media_urls(html) == html

    def test_many_unclosed_tags_scale_linearly(self):
        html = '<iframe src="https://v.test/x">' * 8000
        start = time.perf_counter()
        out = extract_media_urls(html)
        elapsed = time.perf_counter() - start
        assert out == html
        assert elapsed < 2.0

    def test_unclosed_tag_before_closed_one(self):
        html = '<iframe src="https://a.test/1"><iframe src="https://a.test/2"></iframe>'
        assert extract_media_urls(html) == '<iframe src="https://a.test/1"><p>https://a.test/2</p>'
