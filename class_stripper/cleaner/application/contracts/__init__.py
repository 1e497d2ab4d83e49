from .html_formatter import IHTMLFormatter
from .html_parser import IHTMLParser

__all__ = ["IHTMLParser", "IHTMLFormatter"]
