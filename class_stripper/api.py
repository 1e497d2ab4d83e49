import re
from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from class_stripper.cleaner import clean, is_valid_html
from class_stripper.cleaner.domain.value_objects.class_matcher import pattern_matcher
from class_stripper.logger import get_logger
from class_stripper.settings import get_settings

logger = get_logger(__name__)

app = FastAPI(
    title="Class Stripper",
    description="Strips classes, styles and other attributes from HTML fragments.",
    version=get_settings().service_version,
)


class CleanRequest(BaseModel):
    html: str
    options: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Cleaning options, snake_case or camelCase (e.g. stripIds)",
    )
    preserve_patterns: List[str] = Field(
        default_factory=list,
        description="Regular expressions of class names to keep",
    )


class CleanResponse(BaseModel):
    html: str
    statistics: Optional[Dict[str, int]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class ValidateRequest(BaseModel):
    html: str


class ValidateResponse(BaseModel):
    valid: bool


@app.post("/clean", response_model=CleanResponse)
def clean_html(request: CleanRequest):
    """Clean an HTML fragment. Failures are reported in the body, not as HTTP errors."""
    logger.info(f"Received clean request for {len(request.html)} chars")

    options = dict(request.options or {})
    if request.preserve_patterns:
        try:
            patterns = [pattern_matcher(expr) for expr in request.preserve_patterns]
        except re.error as e:
            logger.warning(f"Invalid preserve pattern: {e}")
            return CleanResponse(
                html="",
                error=f"Invalid preserve pattern: {e}",
                error_code="CONFIG_ERROR",
            )
        existing = options.pop("preserveClasses", None) or options.pop(
            "preserve_classes", None
        )
        if isinstance(existing, str):
            existing = [existing]
        options["preserve_classes"] = list(existing or []) + patterns

    result = clean(request.html, options)
    if not result.ok:
        logger.warning(f"Clean request finished with error: {result.error}")

    return CleanResponse(**result.to_dict())


@app.post("/validate", response_model=ValidateResponse)
def validate_html(request: ValidateRequest):
    return ValidateResponse(valid=is_valid_html(request.html))


@app.get("/")
async def root():
    return {"message": f"{get_settings().service_name} is running."}
