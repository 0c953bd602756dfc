"""
Tests for HTML sanitization of cell content.

These tests verify that markup passed through to a table can never carry
script, event handlers or dangerous URLs.
"""

import unittest
from data_table.sanitization import sanitize_html


class TestHtmlSanitization(unittest.TestCase):
    """Test HTML sanitization functionality."""

    def test_sanitize_html_removes_script_tags(self):
        """Test that script tags are removed."""
        malicious_html = '<script>alert("xss")</script><span>Safe content</span>'
        result = sanitize_html(malicious_html)
        self.assertNotIn('<script>', result)
        self.assertIn('<span>Safe content</span>', result)

    def test_sanitize_html_removes_event_handlers(self):
        """Test that event handler attributes are removed."""
        malicious_html = '<span onclick="alert(1)">Click me</span>'
        result = sanitize_html(malicious_html)
        self.assertNotIn('onclick', result)
        self.assertIn('Click me', result)

    def test_sanitize_html_removes_javascript_urls(self):
        """Test that javascript: URLs are removed."""
        malicious_html = '<a href="javascript:alert(1)">Link</a>'
        result = sanitize_html(malicious_html)
        self.assertNotIn('javascript:', result)
        self.assertIn('Link', result)

    def test_sanitize_html_keeps_safe_links(self):
        """Test that http links and their attributes survive."""
        safe_html = '<a href="https://example.com" title="Example">Example</a>'
        self.assertEqual(sanitize_html(safe_html), safe_html)

    def test_sanitize_html_drops_style(self):
        """Test that inline styles are not allowed."""
        result = sanitize_html('<span style="color: red" class="badge">Red</span>')
        self.assertNotIn('style', result)
        self.assertIn('class="badge"', result)

    def test_sanitize_html_empty_input(self):
        """Test that empty values yield an empty string."""
        self.assertEqual(sanitize_html(''), '')
        self.assertEqual(sanitize_html(None), '')

    def test_sanitize_html_non_string(self):
        """Test that numbers are rendered as text."""
        self.assertEqual(sanitize_html(42), '42')


if __name__ == '__main__':
    unittest.main()
