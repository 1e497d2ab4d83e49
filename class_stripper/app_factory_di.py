"""
Dependency Injection Module
Single Responsibility: Configure all dependency bindings for the application.
"""
from injector import Binder, Module, provider, singleton

from class_stripper.cleaner.application.contracts.html_formatter import IHTMLFormatter
from class_stripper.cleaner.application.contracts.html_parser import IHTMLParser
from class_stripper.cleaner.application.services.attribute_stripper import (
    AttributeStripper,
)
from class_stripper.cleaner.application.services.clean_orchestrator import (
    CleanOrchestrator,
)
from class_stripper.cleaner.application.services.html_validator import (
    HtmlValidityChecker,
)
from class_stripper.cleaner.application.services.structural_optimizer import (
    StructuralOptimizer,
)
from class_stripper.cleaner.application.services.tag_remover import TagRemover
from class_stripper.cleaner.infrastructure.external.beautiful_soup_adapter import (
    BeautifulSoupAdapter,
)
from class_stripper.cleaner.infrastructure.external.html_beautifier import (
    HtmlBeautifier,
)
from class_stripper.settings import Settings


class AppModule(Module):
    def __init__(self, settings: Settings):
        self._settings = settings

    def configure(self, binder: Binder):
        binder.bind(Settings, to=self._settings, scope=singleton)

    @singleton
    @provider
    def provide_html_parser(self) -> IHTMLParser:
        return BeautifulSoupAdapter()

    @singleton
    @provider
    def provide_html_formatter(self) -> IHTMLFormatter:
        return HtmlBeautifier()

    @singleton
    @provider
    def provide_structural_optimizer(self, settings: Settings) -> StructuralOptimizer:
        return StructuralOptimizer(**settings.optimizer_ceilings)

    @singleton
    @provider
    def provide_clean_orchestrator(
        self,
        parser: IHTMLParser,
        formatter: IHTMLFormatter,
        optimizer: StructuralOptimizer,
    ) -> CleanOrchestrator:
        return CleanOrchestrator(
            parser=parser,
            formatter=formatter,
            tag_remover=TagRemover(),
            attribute_stripper=AttributeStripper(),
            optimizer=optimizer,
        )

    @singleton
    @provider
    def provide_validity_checker(self, parser: IHTMLParser) -> HtmlValidityChecker:
        return HtmlValidityChecker(parser=parser)
