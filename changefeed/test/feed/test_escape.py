from __future__ import annotations

from changefeed.feed.escape import escape_html, escape_xml


def test_escape_html_all_specials() -> None:
    assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"


def test_escape_html_script_tag() -> None:
    escaped = escape_html('<script>&"test"</script>')
    assert escaped == "&lt;script&gt;&amp;&quot;test&quot;&lt;/script&gt;"
    assert "&amp;amp;" not in escaped


def test_escape_html_plain_text_unchanged() -> None:
    assert escape_html("Fixed crash in Core 1.2.0") == "Fixed crash in Core 1.2.0"


def test_escape_html_does_not_double_escape_entities() -> None:
    assert escape_html("&amp;") == "&amp;"
    assert escape_html("Tom &amp; Jerry & co") == "Tom &amp; Jerry &amp; co"
    assert escape_html("&#39; &#x27;") == "&#39; &#x27;"


def test_escape_xml_is_idempotent_on_escaped_html() -> None:
    html = escape_html("a < b && c > 'd'")
    assert escape_xml(html) == html


def test_escape_xml_escapes_markup() -> None:
    assert escape_xml("<h3>A & B</h3>") == "&lt;h3&gt;A &amp; B&lt;/h3&gt;"


def test_escape_keeps_newlines() -> None:
    assert escape_xml("a\nb") == "a\nb"


def test_undeclared_entities_are_escaped() -> None:
    assert escape_html("Use&nbsp;spacing") == "Use&amp;nbsp;spacing"
    assert escape_xml("&copy; 2025 &foo;") == "&amp;copy; 2025 &amp;foo;"
    assert escape_xml("R&D; AT&T;") == "R&amp;D; AT&amp;T;"


def test_predefined_entities_are_kept() -> None:
    assert escape_xml("&amp; &lt; &gt; &quot; &apos;") == "&amp; &lt; &gt; &quot; &apos;"


def test_numeric_references() -> None:
    assert escape_xml("&#233; &#xE9;") == "&#233; &#xE9;"
    # Uppercase X is not a character reference.
    assert escape_xml("&#XE9;") == "&amp;#XE9;"
    # Not XML characters.
    assert escape_xml("&#0; &#x1;") == "&amp;#0; &amp;#x1;"
    assert escape_xml("&#99999999;") == "&amp;#99999999;"


def test_unterminated_reference_is_escaped() -> None:
    assert escape_xml("&amp") == "&amp;amp"
    assert escape_xml("& ;") == "&amp; ;"
