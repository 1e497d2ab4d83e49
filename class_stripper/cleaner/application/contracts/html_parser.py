"""
IHTMLParser Interface - Abstract interface for HTML parsing

This interface follows the Dependency Inversion Principle (DIP) by providing
an abstraction for HTML parsing operations, allowing different implementations
to be injected without changing the dependent code.
"""

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup


class IHTMLParser(ABC):
    """
    Abstract interface for HTML parsing operations.

    The cleaning services mutate the returned tree in place; the parser is
    also responsible for turning it back into markup.
    """

    @abstractmethod
    def parse_html(self, html_content: str) -> BeautifulSoup:
        """
        Parse an HTML fragment into a mutable tree.

        Args:
            html_content: Raw HTML string to parse

        Returns:
            Parsed HTML structure (BeautifulSoup object)

        Raises:
            ParsingError: If the parser rejects the markup
        """
        pass

    @abstractmethod
    def serialize(self, soup: BeautifulSoup) -> str:
        """
        Serialize a parsed tree back to markup.

        Args:
            soup: Parsed HTML structure

        Returns:
            HTML string
        """
        pass

    @abstractmethod
    def is_well_formed(self, html_content: str) -> bool:
        """
        Lenient structural check of raw markup.

        Args:
            html_content: Raw HTML string

        Returns:
            True if the markup parses without structural error
        """
        pass
