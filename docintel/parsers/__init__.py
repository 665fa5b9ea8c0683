"""
Parsers Module.
Best-effort structured extraction from language model responses.
"""

from .response_parser import (
    INSIGHT_FIELDS,
    KEYWORD_FIELDS,
    FieldSpec,
    extract_list_section,
    find_json_object,
    parse_numbered_list,
    parse_structured_response,
    parse_summary_response,
)

__all__ = [
    "INSIGHT_FIELDS",
    "KEYWORD_FIELDS",
    "FieldSpec",
    "extract_list_section",
    "find_json_object",
    "parse_numbered_list",
    "parse_structured_response",
    "parse_summary_response",
]
