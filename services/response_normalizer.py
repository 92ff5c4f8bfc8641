from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n"

DEFAULT_TITLE = "Generated Article Title"
DEFAULT_INTRODUCTION = "Introduction content here..."
DEFAULT_MAIN_CONTENT = "Main content here..."
DEFAULT_CONCLUSION = "Conclusion content here..."
PLACEHOLDER_TABLE_OF_CONTENTS = (
    "<ol><li>Section 1</li><li>Section 2</li><li>Section 3</li></ol>"
)


@dataclass(frozen=True)
class NormalizedContent:
    data: dict[str, Any]
    used_fallback: bool


def parse_fallback(raw_text: str) -> dict[str, str]:
    """Split free text on blank lines into the five listicle fields.

    Crude on purpose: the only guarantee is five non-empty strings.
    """
    sections = raw_text.split(SECTION_SEPARATOR)

    title = sections[0]
    introduction = sections[1] if len(sections) > 1 else ""
    conclusion = sections[-1]
    main_content = SECTION_SEPARATOR.join(sections[2:-1])

    return {
        "title": title or DEFAULT_TITLE,
        "introduction": introduction or DEFAULT_INTRODUCTION,
        "tableOfContents": PLACEHOLDER_TABLE_OF_CONTENTS,
        "mainContent": main_content or DEFAULT_MAIN_CONTENT,
        "conclusion": conclusion or DEFAULT_CONCLUSION,
    }


def normalize(raw_text: str) -> NormalizedContent:
    # A decoded object is passed through untouched, even with missing fields.
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError:
        logger.info("Model output is not valid JSON; using fallback parser")
    else:
        if isinstance(payload, dict):
            return NormalizedContent(data=payload, used_fallback=False)
        logger.info("Model returned a JSON %s instead of an object; using fallback parser", type(payload).__name__)

    return NormalizedContent(data=parse_fallback(raw_text), used_fallback=True)
