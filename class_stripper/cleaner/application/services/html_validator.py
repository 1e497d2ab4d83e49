"""Validity check run before cleaning a selection."""

from typing import Any

from class_stripper.cleaner.application.contracts.html_parser import IHTMLParser
from class_stripper.logger import get_logger

logger = get_logger(__name__)


class HtmlValidityChecker:
    """Decides whether a text blob is plausibly HTML."""

    def __init__(self, parser: IHTMLParser):
        self.parser = parser

    def is_valid_html(self, text: Any) -> bool:
        """
        Check that *text* looks like markup and parses without structural error.

        Plain prose (no ``<`` and no ``>``) is rejected without parsing.

        Args:
            text: Candidate HTML

        Returns:
            True if the text is well-formed HTML
        """
        if not isinstance(text, str):
            return False

        # Need at least one open or close bracket to be html
        if "<" not in text and ">" not in text:
            logger.debug("Rejected text without any markup")
            return False

        return self.parser.is_well_formed(text)
