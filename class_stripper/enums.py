from enum import Enum


class StatisticKey(Enum):
    CLASSES_REMOVED = "classes_removed"
    IDS_REMOVED = "ids_removed"
    STYLES_REMOVED = "styles_removed"
    DATA_ATTRIBUTES_REMOVED = "data_attributes_removed"
    EVENT_HANDLERS_REMOVED = "event_handlers_removed"
    ARIA_ATTRIBUTES_REMOVED = "aria_attributes_removed"
    TAGS_REMOVED = "tags_removed"
    EMPTY_DIVS_REMOVED = "empty_divs_removed"
    DIVS_BUBBLED_UP = "divs_bubbled_up"
    ELEMENTS_PROCESSED = "elements_processed"

    @property
    def camel_name(self) -> str:
        """Counter name in camelCase, e.g. ``classesRemoved``."""
        head, *rest = self.value.split("_")
        return head + "".join(part.capitalize() for part in rest)
