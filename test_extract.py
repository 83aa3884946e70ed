from __future__ import annotations

from extract import PROSE_LIMIT, clean_code, extract
from models import ExtractedContent


def test_single_block_with_prose():
    body = "<p>Try this:</p><pre><code>x := 1\nfmt.Println(x)</code></pre><p>That prints 1.</p>"
    content = extract(body)
    assert content.code == ("x := 1\nfmt.Println(x)",)
    assert content.before == "Try this:"
    assert content.after == "That prints 1."


def test_no_code_blocks():
    body = "<p>Just use the standard library.</p><p>It works.</p>"
    assert extract(body) == ExtractedContent()


def test_inline_code_is_not_a_block():
    assert extract("<p>Call <code>len(x)</code>.</p>").code == ()


def test_pre_and_code_attributes():
    body = '<pre class="lang-py prettyprint-override"><code class="hljs">print(1)\n</code></pre>'
    assert extract(body).code == ("print(1)",)


def test_adjacent_blocks_are_separate():
    body = (
        "<p>First:</p>"
        "<pre><code>a = 1</code></pre>"
        "<p>then</p>"
        "<pre><code>b = 2</code></pre>"
        "<p>Done.</p>"
    )
    content = extract(body)
    assert content.code == ("a = 1", "b = 2")
    assert content.before == "First:"
    assert content.after == "Done."


def test_block_spans_lines():
    body = "<pre><code>for i in range(3):\n    print(i)\n</code></pre>"
    assert extract(body).code == ("for i in range(3):\n    print(i)",)


def test_empty_blocks_dropped():
    body = "<pre><code>   \n</code></pre><pre><code>x</code></pre>"
    assert extract(body).code == ("x",)


def test_code_entities_decoded():
    body = "<pre><code>if a &lt; b &amp;&amp; c &gt; d:\n    s = &quot;ok&quot;</code></pre>"
    assert extract(body).code == ('if a < b && c > d:\n    s = "ok"',)


def test_code_entities_decoded_before_tags_stripped():
    assert extract("<pre><code>&lt;b&gt;x&lt;/b&gt;</code></pre>").code == ("x",)


def test_language_hint_line_removed():
    assert clean_code(":python\nimport os\n") == "import os"


def test_language_hint_only_at_start():
    assert clean_code("x = 1\n:python\n") == "x = 1\n:python"


def test_snippet_comment_removed():
    assert clean_code("<!-- language: lang-js -->\nconsole.log(1)") == "console.log(1)"


def test_long_before_keeps_second_to_last_sentence():
    intro = "This is filler text that goes on for a while. " * 4
    before = intro + "Here is the snippet you want."
    content = extract(f"<p>{before}</p><pre><code>x</code></pre>")
    assert len(before) > PROSE_LIMIT
    assert content.before == "Here is the snippet you want."


def test_long_before_without_sentences_keeps_tail():
    before = "word " * 40 + "end"
    content = extract(f"<p>{before}</p><pre><code>x</code></pre>")
    assert content.before == before[-PROSE_LIMIT:]
    assert content.before.endswith("end")


def test_long_after_cut_at_last_period():
    after = "The first sentence explains it. " + "x" * 200
    content = extract(f"<pre><code>x</code></pre><p>{after}</p>")
    assert content.after == "The first sentence explains it."


def test_long_after_without_period_is_truncated():
    after = "y" * 200
    content = extract(f"<pre><code>x</code></pre><p>{after}</p>")
    assert content.after == "y" * PROSE_LIMIT


def test_after_length_bounded():
    after = ("Sentence number one here. " * 12).strip()
    content = extract(f"<pre><code>x</code></pre><p>{after}</p>")
    assert len(content.after) <= PROSE_LIMIT
    assert content.after.endswith(".")
