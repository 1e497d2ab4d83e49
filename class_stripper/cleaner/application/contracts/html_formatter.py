"""
IHTMLFormatter Interface - Abstract interface for output beautification
"""

from abc import ABC, abstractmethod

from class_stripper.cleaner.domain.value_objects.cleaning_config import BeautifyOptions


class IHTMLFormatter(ABC):
    """
    Abstract interface for pretty-printing serialized HTML.

    Invoked once on the final serialized string of a clean() call.
    """

    @abstractmethod
    def beautify(self, html_content: str, options: BeautifyOptions) -> str:
        """
        Reformat HTML for readability.

        Args:
            html_content: Serialized HTML string
            options: Indentation and newline handling options

        Returns:
            Formatted HTML string
        """
        pass
