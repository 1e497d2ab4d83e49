"""
MarkupValidator - lenient tag-balance check for raw HTML.

BeautifulSoup repairs whatever it is given, so it cannot tell a caller that a
fragment is broken. This checker walks the same standard-library tokenizer the
``html.parser`` tree builder uses and keeps a stack of open elements instead.
"""

import re
from html.parser import HTMLParser
from typing import List

from class_stripper.core.constants import (
    IMPLIED_END_TAGS,
    OPTIONAL_END_TAG_ELEMENTS,
    VOID_ELEMENTS,
)
from class_stripper.logger import get_logger

logger = get_logger(__name__)

# Tag opener left without its closing ">"
_DANGLING_TAG = re.compile(r"<[/!?a-zA-Z]")
_DANGLING_END_TAG = re.compile(r"</([a-zA-Z][^\s/>]*)\s*$")


class _TagBalanceChecker(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.open_tags: List[str] = []
        self.errors: List[str] = []

    def handle_starttag(self, tag, attrs):
        if tag in VOID_ELEMENTS:
            return
        implied = IMPLIED_END_TAGS.get(tag)
        while implied and self.open_tags and self.open_tags[-1] in implied:
            self.open_tags.pop()
        self.open_tags.append(tag)

    def handle_startendtag(self, tag, attrs):
        # <tag/> opens and closes in one token
        pass

    def handle_endtag(self, tag):
        if tag in VOID_ELEMENTS:
            return
        if tag not in self.open_tags:
            self.errors.append(f"Unexpected closing tag </{tag}>")
            return
        while self.open_tags:
            current = self.open_tags.pop()
            if current == tag:
                return
            if current not in OPTIONAL_END_TAG_ELEMENTS:
                self.errors.append(f"Element <{current}> closed by </{tag}>")

    def finish(self) -> None:
        leftover = self.rawdata
        if leftover and _DANGLING_TAG.search(leftover):
            self.errors.append(f"Incomplete markup at end of input: {leftover[:30]!r}")
            # The element it was meant to close is not reported as unclosed too
            end_tag = _DANGLING_END_TAG.search(leftover)
            if end_tag and end_tag.group(1).lower() in self.open_tags:
                self.handle_endtag(end_tag.group(1).lower())
        for tag in self.open_tags:
            if tag not in OPTIONAL_END_TAG_ELEMENTS:
                self.errors.append(f"Unclosed element <{tag}>")


class MarkupValidator:
    """Reports whether raw markup has balanced, complete tags."""

    def find_errors(self, html_content: str) -> List[str]:
        """
        Collect the structural errors of *html_content*.

        Args:
            html_content: Raw HTML string

        Returns:
            Human-readable error descriptions, empty when the markup is balanced
        """
        checker = _TagBalanceChecker()
        try:
            checker.feed(html_content)
        except AssertionError as e:
            return [f"Tokenizer rejected markup: {e}"]
        checker.finish()
        return checker.errors

    def is_well_formed(self, html_content: str) -> bool:
        errors = self.find_errors(html_content)
        if errors:
            logger.debug(f"Markup is not well formed: {errors[0]}")
            return False
        return True
