"""Code passes: fenced blocks and inline spans.

Syntax:
```python          → <pre><code class="language-python">
print("hi")            print(&quot;hi&quot;)
```                    </code></pre>

`code`             → <code>code</code>

The body of a fenced block loses its break markers (``<pre>`` keeps the
newlines) and is HTML-escaped. The opening fence must start a line; the
closing fence may appear anywhere after it. Inline spans never cross a line
and are inserted as-is.

"""

from __future__ import annotations

import re

from pasada.utils.text import escape_html, remove_breaks

_FENCED_RE = re.compile(
    r"^```(?P<lang>[\w#+.-]*)[ \t]*(?:<br>)?\n(?P<body>.*?)```(?:<br>)?",
    re.MULTILINE | re.DOTALL,
)
_INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")


def _render_fenced(match: re.Match[str]) -> str:
    lang = match.group("lang")
    code = escape_html(remove_breaks(match.group("body")))
    class_attr = f' class="language-{lang}"' if lang else ""
    return f"<pre><code{class_attr}>{code}</code></pre>"


def convert_code_blocks(text: str) -> str:
    return _FENCED_RE.sub(_render_fenced, text)


def convert_inline_code(text: str) -> str:
    return _INLINE_CODE_RE.sub(r"<code>\1</code>", text)
