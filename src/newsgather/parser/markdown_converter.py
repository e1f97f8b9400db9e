"""HTML tree to Markdown conversion on top of markdownify."""

import re

import markdownify
from bs4 import Tag
from bs4.element import NavigableString, PreformattedString

from newsgather.parser.html_tree import collapse_whitespace

BLOCK_BREAK = "\n\n"

# Text after one of these starts a new line, so its leading space is dropped
LINE_START_TAGS = frozenset({
    "p", "div", "section", "article", "main", "header", "footer", "aside", "nav",
    "figure", "figcaption", "address", "details", "summary", "dl", "dt", "dd",
    "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "li", "blockquote", "pre",
    "table", "thead", "tbody", "tfoot", "tr", "td", "th", "br", "hr",
})

_WHITESPACE_RUN = re.compile(r"\s+")
_BACKTICK_FENCE = re.compile(r"`{3,}")
_BACKTICK_RUN = re.compile(r"`+")
_LINK_TEXT_SPECIALS = re.compile(r"([\[\]])")
_URL_SPECIALS = str.maketrans({" ": "%20", "(": "%28", ")": "%29", "<": "%3C", ">": "%3E"})
_FENCED_BLOCK = re.compile(r"^(`{3,})[^\n`]*\n.*?\n\1$", re.MULTILINE | re.DOTALL)
_BLANK_LINE = re.compile(r"^[ \t]+$", re.MULTILINE)
_EXTRA_BREAKS = re.compile(r"\n{3,}")


class MarkdownConverter(markdownify.MarkdownConverter):
    """Converts a filtered HTML tree into Markdown text.

    Output follows document order and is byte-identical for identical trees.
    A converter holds no per-document state, so one instance can be shared.
    """

    class Options(markdownify.MarkdownConverter.Options):
        heading_style = markdownify.ATX
        bullets = "-"
        strong_em_symbol = markdownify.ASTERISK

    def convert(self, root: Tag) -> str:  # type: ignore[override]
        """Render root and everything under it as Markdown.

        Args:
            root: Element (or whole document) to render.

        Returns:
            Markdown text ending with a single newline, or an empty string if
            nothing renderable was found.

        """
        return _normalize(self.convert_soup(root))

    def process_text(self, el: NavigableString, parent_tags: set[str] | None = None) -> str:
        if isinstance(el, PreformattedString):
            # CDATA, processing instructions and declarations
            return ""
        parent_tags = parent_tags or set()
        text = str(el)
        if "pre" in parent_tags:
            return text

        text = _WHITESPACE_RUN.sub(" ", text)
        if "_noformat" not in parent_tags:
            text = _BACKTICK_FENCE.sub(lambda m: "\\`" * len(m.group()), text)
        if "a" in parent_tags:
            text = _escape_link_text(text)
        if _starts_line(el):
            text = text.lstrip(" ")
        return text

    # --- block elements ---

    def convert_div(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        if "_inline" in parent_tags:
            return f" {text.strip()} "
        # Trailing spaces of the last line are content and stay
        if not text.strip():
            return ""
        return f"{BLOCK_BREAK}{text}{BLOCK_BREAK}"

    convert_p = convert_div
    convert_article = convert_div
    convert_section = convert_div
    convert_main = convert_div
    convert_header = convert_div
    convert_footer = convert_div
    convert_aside = convert_div
    convert_nav = convert_div
    convert_figure = convert_div
    convert_figcaption = convert_div
    convert_address = convert_div
    convert_details = convert_div
    convert_summary = convert_div

    def convert_hN(self, n: int, el: Tag, text: str, parent_tags: set[str]) -> str:
        if not text.strip():
            return ""
        return super().convert_hN(n, el, text, parent_tags)

    def convert_br(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        if "_inline" in parent_tags:
            return " "
        return BLOCK_BREAK

    convert_hr = convert_br

    def convert_pre(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        body = markdownify.strip_pre(text)
        if not body.strip():
            return ""
        longest = max((len(run) for run in _BACKTICK_RUN.findall(body)), default=0)
        fence = "`" * max(3, longest + 1)
        return f"{BLOCK_BREAK}{fence}{_code_language(el)}\n{body}\n{fence}{BLOCK_BREAK}"

    def convert_head(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        return ""

    convert_template = convert_head

    def convert_video(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        # Media sources are left to the cleaning policy, not turned into links
        return text

    def convert_script(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        # Dropping scripts is the cleaning policy's decision
        return text

    # --- inline elements ---

    def convert_a(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        if "_noformat" in parent_tags:
            return text
        prefix, suffix, text = markdownify.chomp(text)
        if not text:
            return ""
        href = str(el.get("href") or "").strip()
        if not href:
            return f"{prefix}{text}{suffix}"
        return f"{prefix}[{text}]({_escape_url(href)}){suffix}"

    def convert_img(self, el: Tag, text: str, parent_tags: set[str]) -> str:
        src = str(el.get("src") or "").strip()
        if not src:
            return ""
        alt = _escape_link_text(collapse_whitespace(str(el.get("alt") or "")))
        return f"![{alt}]({_escape_url(src)})"


def _starts_line(el: NavigableString) -> bool:
    """Whether text begins right after a block boundary."""
    previous = el.previous_sibling
    if previous is None:
        return el.parent is not None and el.parent.name in LINE_START_TAGS
    return isinstance(previous, Tag) and previous.name in LINE_START_TAGS


def _code_language(pre: Tag) -> str:
    code = pre.find("code")
    if isinstance(code, Tag):
        for css_class in code.get("class") or []:
            if css_class.startswith("language-"):
                return css_class.removeprefix("language-")
    return ""


def _escape_link_text(text: str) -> str:
    return _LINK_TEXT_SPECIALS.sub(r"\\\1", text)


def _escape_url(url: str) -> str:
    return url.translate(_URL_SPECIALS)


def _normalize(text: str) -> str:
    """Collapse blank lines outside fenced code and end with one newline."""
    parts: list[str] = []
    position = 0
    for match in _FENCED_BLOCK.finditer(text):
        parts.append(_normalize_prose(text[position:match.start()]))
        parts.append(match.group(0))
        position = match.end()
    parts.append(_normalize_prose(text[position:]))

    text = "".join(parts).lstrip().rstrip("\n")
    return f"{text}\n" if text else ""


def _normalize_prose(text: str) -> str:
    text = _BLANK_LINE.sub("", text)
    return _EXTRA_BREAKS.sub(BLOCK_BREAK, text)
