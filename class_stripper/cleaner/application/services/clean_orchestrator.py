"""Clean Orchestrator composing the cleaning pipeline.

Tag removal, attribute stripping and structural optimization run against one
freshly parsed tree per call; the tree is then serialized and optionally
beautified. Failures never escape: they come back as a failed CleanResult.
"""

from typing import Any, Optional

from injector import inject

from class_stripper.cleaner.application.contracts.html_formatter import IHTMLFormatter
from class_stripper.cleaner.application.contracts.html_parser import IHTMLParser
from class_stripper.cleaner.domain.clean_result import CleanResult
from class_stripper.cleaner.domain.exceptions import (
    CleanerError,
    InternalFaultError,
    InvalidInputError,
)
from class_stripper.cleaner.domain.statistics import CleaningStatistics, NullStatistics
from class_stripper.cleaner.domain.value_objects.cleaning_config import CleaningConfig
from class_stripper.logger import get_logger

from .attribute_stripper import AttributeStripper
from .structural_optimizer import StructuralOptimizer
from .tag_remover import TagRemover

logger = get_logger(__name__)


class CleanOrchestrator:
    """
    Service responsible for running a full clean() call.

    Responsibilities:
    - Reject unusable input before parsing
    - Resolve partial options into a CleaningConfig
    - Run tag removal, attribute stripping and optimization in order
    - Serialize and beautify the tree
    - Convert every failure into a CleanResult
    """

    @inject
    def __init__(
        self,
        parser: IHTMLParser,
        formatter: IHTMLFormatter,
        tag_remover: TagRemover,
        attribute_stripper: AttributeStripper,
        optimizer: StructuralOptimizer,
    ):
        self.parser = parser
        self.formatter = formatter
        self.tag_remover = tag_remover
        self.attribute_stripper = attribute_stripper
        self.optimizer = optimizer

    def clean(self, html: Any, config: Optional[Any] = None) -> CleanResult:
        """
        Clean an HTML fragment.

        Args:
            html: Raw HTML string
            config: CleaningConfig, mapping of options or None for defaults

        Returns:
            CleanResult with the cleaned html, or an error and empty html
        """
        if not isinstance(html, str) or not html:
            error = InvalidInputError(html)
            logger.warning(f"Rejected clean request: {error}")
            return CleanResult.failure(error)

        statistics: Optional[CleaningStatistics] = None
        stage = "configuration"
        try:
            resolved = CleaningConfig.from_options(config)
            if resolved.track_statistics:
                statistics = CleaningStatistics()
            accumulator = statistics if statistics is not None else NullStatistics()
            logger.debug(f"Cleaning {len(html)} chars with {resolved}")

            stage = "parsing"
            soup = self.parser.parse_html(html)

            stage = "tag removal"
            if resolved.has_tags_to_remove:
                self.tag_remover.remove_tags(soup, resolved.remove_tags, accumulator)

            stage = "attribute stripping"
            self.attribute_stripper.strip_tree(soup, resolved, accumulator)

            stage = "optimization"
            if resolved.optimize_html:
                self.optimizer.optimize(soup, resolved, accumulator)

            stage = "serialization"
            output = self.parser.serialize(soup)

            if resolved.beautify:
                stage = "beautification"
                output = self.formatter.beautify(output, resolved.beautify_options)

            return CleanResult.success(output, statistics)

        except CleanerError as e:
            logger.warning(f"Cleaning failed during {stage}: {e}")
            return CleanResult.failure(e, statistics)
        except Exception as e:
            logger.error(f"Unexpected error during {stage}: {e}", exc_info=True)
            fault = InternalFaultError(stage, str(e), original_exception=e)
            return CleanResult.failure(fault, statistics)
