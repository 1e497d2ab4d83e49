from .beautiful_soup_adapter import BeautifulSoupAdapter
from .html_beautifier import HtmlBeautifier
from .markup_validator import MarkupValidator

__all__ = ["BeautifulSoupAdapter", "HtmlBeautifier", "MarkupValidator"]
