"""
HtmlBeautifier - Concrete implementation of IHTMLFormatter using BeautifulSoup

Block elements go on their own lines, indented by nesting depth. Text and
inline elements stay together on the line of their block, so beautifying never
inserts whitespace the browser would render.
"""

from typing import List, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag

from class_stripper.cleaner.application.contracts.html_formatter import IHTMLFormatter
from class_stripper.cleaner.domain.value_objects.cleaning_config import BeautifyOptions
from class_stripper.core.constants import INLINE_ELEMENTS, WHITESPACE_SENSITIVE_TAGS
from class_stripper.logger import get_logger

logger = get_logger(__name__)

OUTPUT_FORMATTER = "minimal"


def _is_block(node) -> bool:
    return isinstance(node, Tag) and node.name not in INLINE_ELEMENTS


def _serialize(node) -> str:
    if isinstance(node, Tag):
        return node.decode(formatter=OUTPUT_FORMATTER)
    return node.output_ready(formatter=OUTPUT_FORMATTER)


class HtmlBeautifier(IHTMLFormatter):
    """
    Beautifier backed by a BeautifulSoup tree walk.

    A run of inline content (text, comments, inline elements) between two
    blocks is written as one line with its outer whitespace trimmed; line
    breaks inside the run are kept. ``pre`` is written verbatim.
    """

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def beautify(self, html_content: str, options: BeautifyOptions) -> str:
        """
        Reformat HTML for readability.

        Args:
            html_content: Serialized HTML string
            options: Indentation and newline handling options

        Returns:
            Formatted HTML string without a trailing newline
        """
        soup = BeautifulSoup(html_content, self.parser, multi_valued_attributes=None)
        self._normalize_blank_lines(soup, options)

        lines: List[str] = []
        self._render_children(soup, soup, 0, " " * options.indent_size, lines)
        pretty = "\n".join(lines)
        logger.debug(
            f"Beautified {len(html_content)} chars into {len(pretty)} chars "
            f"(indent={options.indent_size})"
        )
        return pretty

    def _render_children(
        self, soup: BeautifulSoup, parent: Tag, depth: int, unit: str, lines: List[str]
    ) -> None:
        run = []
        for child in parent.contents:
            if _is_block(child):
                self._flush_run(run, depth, unit, lines)
                run = []
                self._render_block(soup, child, depth, unit, lines)
            else:
                run.append(child)
        self._flush_run(run, depth, unit, lines)

    @staticmethod
    def _flush_run(run, depth: int, unit: str, lines: List[str]) -> None:
        text = "".join(_serialize(node) for node in run).strip()
        if text:
            lines.append(unit * depth + text)

    def _render_block(
        self, soup: BeautifulSoup, tag: Tag, depth: int, unit: str, lines: List[str]
    ) -> None:
        indent = unit * depth
        if tag.name in WHITESPACE_SENSITIVE_TAGS or tag.is_empty_element:
            lines.append(indent + _serialize(tag))
            return

        opening, closing = self._tag_shell(soup, tag)
        if not any(_is_block(child) for child in tag.contents):
            inner = "".join(_serialize(child) for child in tag.contents).strip()
            lines.append(f"{indent}{opening}{inner}{closing}")
            return

        lines.append(indent + opening)
        self._render_children(soup, tag, depth + 1, unit, lines)
        lines.append(indent + closing)

    @staticmethod
    def _tag_shell(soup: BeautifulSoup, tag: Tag) -> Tuple[str, str]:
        """Opening and closing markup of *tag* without its children."""
        closing = f"</{tag.name}>"
        markup = soup.new_tag(tag.name, attrs=dict(tag.attrs)).decode(
            formatter=OUTPUT_FORMATTER
        )
        return markup[: -len(closing)], closing

    def _normalize_blank_lines(self, soup: BeautifulSoup, options: BeautifyOptions):
        indent_unit = " " * options.indent_size
        for text in soup.find_all(string=True):
            # Comments, doctypes, script and style bodies are left alone
            if type(text) is not NavigableString:
                continue
            if "\n" not in text.strip():
                continue
            if any(parent.name in WHITESPACE_SENSITIVE_TAGS for parent in text.parents):
                continue

            depth = sum(
                1 for parent in text.parents if not isinstance(parent, BeautifulSoup)
            )
            blank_line = indent_unit * depth if options.indent_empty_lines else ""

            lines = text.split("\n")
            kept = []
            for index, line in enumerate(lines):
                is_edge = index == 0 or index == len(lines) - 1
                if line.strip() or is_edge:
                    kept.append(line)
                elif options.preserve_newlines:
                    kept.append(blank_line)

            normalized = "\n".join(kept)
            if normalized != text:
                text.replace_with(normalized)
