from __future__ import annotations

import logging
from typing import Union

from .declaration_input import parse_declaration_input
from .json_input import parse_json_input
from .models import InputMode, ParsedSchema

logger = logging.getLogger(__name__)

DECLARATION_MARKERS = ("interface", "type ", ":")


def looks_like_declaration(text: str) -> bool:
    return any(marker in text for marker in DECLARATION_MARKERS)


def parse_input(input_text: str, mode: Union[InputMode, str] = InputMode.AUTO) -> ParsedSchema:
    """Parse example data or a type declaration into a schema.

    ``auto`` tries, in order: JSON when the text opens with ``{`` or ``[``
    (kept if it produced fields or had no errors), the declaration parser
    when the text mentions ``interface``, ``type `` or contains a colon,
    and finally JSON again so the caller gets its error message.
    Any mode other than ``json`` or ``typescript`` is treated as ``auto``.
    """
    try:
        mode = InputMode(mode)
    except ValueError:
        logger.debug("Unknown input mode %r, using auto", mode)
        mode = InputMode.AUTO

    if mode is InputMode.JSON:
        return parse_json_input(input_text)
    if mode is InputMode.TYPESCRIPT:
        return parse_declaration_input(input_text)

    trimmed = input_text.strip()

    if trimmed.startswith(("{", "[")):
        result = parse_json_input(input_text)
        if not result.has_errors or result.fields:
            logger.debug("auto: accepted JSON result")
            return result

    if looks_like_declaration(trimmed):
        logger.debug("auto: using declaration parser")
        return parse_declaration_input(input_text)

    logger.debug("auto: falling back to JSON")
    return parse_json_input(input_text)
