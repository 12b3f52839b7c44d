"""Tests for the welcome email templates."""

from services.email.schemas import SendEmailRequest
from services.email.templates import render_html, render_text


def test_rendering_is_deterministic():
    assert render_html("Sam") == render_html("Sam")
    assert render_text("Sam") == render_text("Sam")


def test_greeting_contains_name():
    assert "Hello Sam! 👋" in render_html("Sam")
    assert render_text("Sam").startswith("Hello Sam!\n")


def test_html_is_a_full_document():
    html = render_html("Sam")
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Hello from Mail Service!</title>" in html
    assert "<li>✅ Personalized email templates</li>" in html
    assert html.rstrip().endswith("</html>")


def test_text_lists_features():
    text = render_text("Sam")
    assert "What is Mail Service?" in text
    assert "- Support for both HTML and plain text emails" in text
    assert "<" not in text


def test_html_escapes_name():
    """Markup in the name must not end up as live HTML."""
    name = '<script>alert("x")</script>'
    html = render_html(name)
    assert "<script>" not in html
    assert "Hello &lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;!" in html


def test_text_keeps_name_verbatim():
    name = '<script>alert("x")</script>'
    assert f"Hello {name}!" in render_text(name)


def test_missing_name_uses_placeholder():
    req = SendEmailRequest(recipientEmail="a@b.com")
    assert req.display_name == "there"
    assert "Hello there! 👋" in render_html(req.display_name)
    assert "Hello there!" in render_text(req.display_name)


def test_empty_name_uses_placeholder():
    req = SendEmailRequest(recipientEmail="a@b.com", recipientName="")
    assert req.display_name == "there"
