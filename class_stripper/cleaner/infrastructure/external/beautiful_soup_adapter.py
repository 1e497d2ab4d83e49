"""
BeautifulSoupAdapter - Concrete implementation of IHTMLParser using BeautifulSoup

This adapter implements the IHTMLParser interface using BeautifulSoup4,
following the Adapter pattern and Dependency Inversion Principle.
"""

from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from class_stripper.cleaner.application.contracts.html_parser import IHTMLParser
from class_stripper.cleaner.domain.exceptions import ParsingError
from class_stripper.logger import get_logger

from .markup_validator import MarkupValidator

logger = get_logger(__name__)


class BeautifulSoupAdapter(IHTMLParser):
    """
    Adapter that implements IHTMLParser using BeautifulSoup4.

    Fragments are parsed with the ``html.parser`` builder, which does not add
    ``<html>``/``<body>`` wrappers, so serializing the tree gives back a
    fragment. ``class`` is kept as a plain string attribute instead of
    BeautifulSoup's default token list.
    """

    def __init__(
        self,
        parser: str = "html.parser",
        validator: Optional[MarkupValidator] = None,
    ):
        """
        Initialize the BeautifulSoup adapter.

        Args:
            parser: BeautifulSoup parser to use (default: "html.parser")
            validator: Well-formedness checker (default: MarkupValidator())
        """
        self.parser = parser
        self.validator = validator or MarkupValidator()

    def parse_html(self, html_content: str) -> BeautifulSoup:
        """
        Parse HTML content using BeautifulSoup.

        Args:
            html_content: Raw HTML string to parse

        Returns:
            BeautifulSoup object representing the parsed HTML

        Raises:
            ParsingError: If BeautifulSoup rejects the markup
        """
        try:
            return BeautifulSoup(
                html_content, self.parser, multi_valued_attributes=None
            )
        except ParserRejectedMarkup as e:
            logger.warning(f"Parser rejected markup: {e}")
            raise ParsingError(
                str(e), parser=self.parser, original_exception=e
            ) from e

    def serialize(self, soup: BeautifulSoup) -> str:
        """
        Serialize a parsed tree with BeautifulSoup's minimal formatter.

        Args:
            soup: BeautifulSoup object

        Returns:
            HTML string
        """
        return soup.decode(formatter="minimal")

    def is_well_formed(self, html_content: str) -> bool:
        """
        Check raw markup for unbalanced or incomplete tags.

        Args:
            html_content: Raw HTML string

        Returns:
            True if every element with a required end tag is closed
        """
        return self.validator.is_well_formed(html_content)
