# utils/markdown.py
# =================================================================================
# 📝 Lightweight markup -> HTML for event descriptions.
# - Headings (#, ##, ###), "- " bullets, **bold** and *italic*. Nothing else.
# - Input is escaped first; the result is injected with unsafe_allow_html.
# =================================================================================

import html
import re

_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*(.+?)\*")

_HEADINGS = (                                   # Longest prefix first.
    ("### ", '<h4 class="md-h4">{}</h4>'),
    ("## ", '<h3 class="md-h3">{}</h3>'),
    ("# ", '<h2 class="md-h2">{}</h2>'),
)


def _inline(text: str) -> str:
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    return _ITALIC.sub(r"<em>\1</em>", text)


def render_markdown(text: str | None) -> str:
    if not text:
        return ""

    out: list[str] = []
    in_list = False
    for raw in html.escape(text).split("\n"):
        line = raw.rstrip("\r")

        if line.startswith("- "):
            if not in_list:
                out.append("<ul>")
                in_list = True
            out.append(f"<li>{_inline(line[2:])}</li>")
            continue

        if in_list:
            out.append("</ul>")
            in_list = False

        if not line.strip():
            continue

        for prefix, template in _HEADINGS:
            if line.startswith(prefix):
                out.append(template.format(_inline(line[len(prefix):])))
                break
        else:
            out.append(f'<p class="md-p">{_inline(line.strip())}</p>')

    if in_list:
        out.append("</ul>")
    return "\n".join(out)
