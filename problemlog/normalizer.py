# =========================
# normalizer.py
# HTML -> markdown 風プレーンテキスト
# =========================

import re

# 順序が重要：最後の「残りのタグ削除」より前に各マーカーへ変換する
_TAG_RULES = [
    (re.compile(r"</p>", re.I), "\n\n"),
    (re.compile(r"<br\s*/?>", re.I), "\n"),
    (re.compile(r"</div>", re.I), "\n"),
    (re.compile(r"</li>", re.I), "\n"),
    (re.compile(r"</h[1-6]>", re.I), "\n\n"),
    (re.compile(r"<pre\b[^>]*>", re.I), "\n```\n"),
    (re.compile(r"</pre>", re.I), "\n```\n"),
    (re.compile(r"<code\b[^>]*>", re.I), "`"),
    (re.compile(r"</code>", re.I), "`"),
    (re.compile(r"<strong\b[^>]*>", re.I), "**"),
    (re.compile(r"</strong>", re.I), "**"),
    (re.compile(r"<b\b[^>]*>", re.I), "**"),
    (re.compile(r"</b>", re.I), "**"),
    (re.compile(r"<em\b[^>]*>", re.I), "_"),
    (re.compile(r"</em>", re.I), "_"),
    (re.compile(r"<i\b[^>]*>", re.I), "_"),
    (re.compile(r"</i>", re.I), "_"),
    (re.compile(r"<[^>]*>"), ""),
]

# &amp; は &lt; / &gt; の後に処理する
ENTITIES = [
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
]

_EXTRA_NEWLINES = re.compile(r"\n\s*\n\s*\n")
_HORIZONTAL_SPACE = re.compile(r"[ \t]+")


def decode_entities(text):
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def html_to_text(html):
    """LeetCode の問題本文 HTML を表示・保存用テキストに変換する

    段落・改行・見出しは改行に、pre はコードフェンス、code はバッククォート、
    strong/b は ``**``、em/i は ``_`` になる。それ以外のタグは捨てる。
    """
    text = html or ""
    for pattern, replacement in _TAG_RULES:
        text = pattern.sub(replacement, text)
    text = decode_entities(text)
    text = _EXTRA_NEWLINES.sub("\n\n", text)
    text = _HORIZONTAL_SPACE.sub(" ", text)
    return text.strip()
