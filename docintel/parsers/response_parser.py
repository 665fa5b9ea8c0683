"""
Best-effort parsing of free-text language model output.

Providers are asked for JSON but cannot be trusted to return it. Parsing
runs in two stages:

  1   │ JSON      │ first balanced {...} span that decodes to an object
  2   │ Fallback  │ line scan: "Label:" heading followed by bullet /
      │           │ numbered items, or "Label: value" for scalar fields

Every field has an explicit default, so a missing, malformed or truncated
response still produces a complete result. Nothing in this module raises
on bad provider output.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from ..data_models import SummaryResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Line patterns
# ---------------------------------------------------------------------------
_ITEM_RE = re.compile(r'^\s*(?:[-*•]\s+|\d+[.)]\s*)(.+?)\s*$')
_NUMBERED_LINE_RE = re.compile(r'^\s*\d+[.)]\s*(.+?)\s*$')
_NUMBER_RE = re.compile(r'-?\d+(?:\.\d+)?')
_INT_RE = re.compile(r'\d+')
_CAMEL_RE = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')


def _humanize(name: str) -> str:
    """keyInsights / key_insights -> 'key insights'"""
    return _CAMEL_RE.sub(" ", name).replace("_", " ").lower().strip()


def _normalize_key(key: str) -> str:
    return re.sub(r'[^a-z0-9]', '', key.lower())


# ═══════════════════════════════════════════════════════════════════════════
# Field specifications
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FieldSpec:
    """
    One field to pull out of a provider response.

    kind is "list", "text" or "number". ``label`` is the heading searched
    for by the fallback scan and defaults to the humanized name.
    """
    name: str
    kind: str = "list"
    default: Any = None
    label: Optional[str] = None
    choices: Optional[Tuple[str, ...]] = None
    bounds: Optional[Tuple[float, float]] = None

    @property
    def heading(self) -> str:
        return (self.label or _humanize(self.name)).lower()

    def default_value(self) -> Any:
        if self.kind == "list":
            return list(self.default or [])
        return self.default


KEYWORD_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("keywords"),
    FieldSpec("entities"),
    FieldSpec("topics"),
    FieldSpec("concepts"),
)

INSIGHT_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("sentiment", kind="text", default="neutral",
              choices=("positive", "negative", "neutral")),
    FieldSpec("topics"),
    FieldSpec("complexity", kind="text", default="medium",
              choices=("low", "medium", "high")),
    FieldSpec("readability_score", kind="number", default=50,
              label="readability", bounds=(0, 100)),
    FieldSpec("key_insights"),
    FieldSpec("recommendations"),
)


# ═══════════════════════════════════════════════════════════════════════════
# JSON location
# ═══════════════════════════════════════════════════════════════════════════

def _balanced_pairs(text: str, start: int) -> List[Tuple[int, int]]:
    """(open, close) index pairs of matched braces from ``start``, outside strings."""
    pairs: List[Tuple[int, int]] = []
    stack: List[int] = []
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            stack.append(i)
        elif ch == "}" and stack:
            pairs.append((stack.pop(), i))
    return pairs


def iter_json_spans(text: str) -> Iterator[str]:
    """
    Yield balanced {...} spans in order of their opening brace.

    Spans nested in an already yielded span are skipped. A brace that never
    closes does not hide balanced spans that open after it.
    """
    start = text.find("{")
    if start == -1:
        return
    covered = -1
    for open_pos, close_pos in sorted(_balanced_pairs(text, start)):
        if open_pos > covered:
            yield text[open_pos:close_pos + 1]
            covered = close_pos


def find_json_object(text: str) -> Optional[str]:
    """Return the first balanced {...} span in ``text``, if any."""
    return next(iter_json_spans(text or ""), None)


def load_json_object(text: str) -> Optional[Dict[str, Any]]:
    """Decode the first balanced span that is a JSON object."""
    for span in iter_json_spans(text or ""):
        try:
            value = json.loads(span)
        except (ValueError, RecursionError):
            continue
        if isinstance(value, dict):
            return value
    return None


# ═══════════════════════════════════════════════════════════════════════════
# Value coercion
# ═══════════════════════════════════════════════════════════════════════════

def _coerce_list(value: Any) -> Optional[List[str]]:
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    if isinstance(value, str):
        return [part.strip() for part in re.split(r'[,\n]', value) if part.strip()]
    return None


def _coerce_text(value: Any, choices: Optional[Sequence[str]]) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    if not choices:
        return text or None
    lowered = text.lower()
    if lowered in choices:
        return lowered
    # "Positive overall" -> positive; earliest mention wins
    found = []
    for choice in choices:
        m = re.search(rf'\b{re.escape(choice)}\b', lowered)
        if m:
            found.append((m.start(), choice))
    return min(found)[1] if found else None


def _coerce_number(value: Any, bounds: Optional[Tuple[float, float]]) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        m = _NUMBER_RE.search(value)
        if not m:
            return None
        number = float(m.group())
    else:
        return None
    if bounds:
        low, high = bounds
        number = min(high, max(low, number))
    return number


def coerce_field(spec: FieldSpec, value: Any) -> Any:
    """Coerce a raw value to the field's kind, or return the default."""
    if spec.kind == "list":
        coerced = _coerce_list(value)
    elif spec.kind == "number":
        coerced = _coerce_number(value, spec.bounds)
    else:
        coerced = _coerce_text(value, spec.choices)
    return spec.default_value() if coerced is None else coerced


# ═══════════════════════════════════════════════════════════════════════════
# Line-oriented fallback
# ═══════════════════════════════════════════════════════════════════════════

def _is_heading(line: str) -> bool:
    """A new section: numbered or plain line ending with ':', or a markdown heading."""
    stripped = line.strip().strip("*_").strip()
    return stripped.startswith("#") or stripped.endswith(":")


def extract_list_section(text: str, label: str) -> List[str]:
    """
    Collect bullet / numbered items listed under the first line containing
    ``label`` (case-insensitive).

    Items stop at a new heading, or at a blank line once collection started.
    Lines without an item prefix are skipped. A heading with inline values
    ("Keywords: a, b, c") and no items below it yields the inline values.
    """
    if not text or not label:
        return []
    label = label.lower()
    lines = text.splitlines()

    for i, line in enumerate(lines):
        if label not in line.lower():
            continue

        items: List[str] = []
        for following in lines[i + 1:]:
            if not following.strip():
                if items:
                    break
                continue
            if _is_heading(following):
                break
            m = _ITEM_RE.match(following)
            if m:
                items.append(m.group(1).strip().strip("*").strip())

        if not items and ":" in line:
            inline = line.split(":", 1)[1].strip().strip("*").strip()
            # Fragments of truncated JSON are not inline values
            if not inline.startswith(("[", "{", '"')):
                items = _coerce_list(inline) or []

        if items:
            return items

    return []


def extract_labeled_value(text: str, label: str) -> Optional[str]:
    """Value of the first 'Label: value' line (or the line after a bare 'Label:')."""
    if not text or not label:
        return None
    label = label.lower()
    lines = text.splitlines()
    for i, line in enumerate(lines):
        lowered = line.lower()
        pos = lowered.find(label)
        if pos == -1:
            continue
        rest = line[pos + len(label):]
        if ":" in rest:
            value = rest.split(":", 1)[1].strip().strip("*").strip()
        else:
            value = rest.strip(" *-_")
        if value:
            return value
        for following in lines[i + 1:]:
            if following.strip():
                return following.strip()
        return None
    return None


def _fallback_field(text: str, spec: FieldSpec) -> Any:
    if spec.kind == "list":
        return extract_list_section(text, spec.heading)
    return coerce_field(spec, extract_labeled_value(text, spec.heading))


# ═══════════════════════════════════════════════════════════════════════════
# Public entry points
# ═══════════════════════════════════════════════════════════════════════════

def parse_structured_response(raw_text: Any, fields: Sequence[FieldSpec]) -> Dict[str, Any]:
    """
    Extract ``fields`` from a provider response.

    Returns a dict keyed by field name with every field present. Missing or
    unusable values take the field default.
    """
    text = raw_text if isinstance(raw_text, str) else ("" if raw_text is None else str(raw_text))

    data = load_json_object(text)
    if data is not None:
        by_key = {_normalize_key(str(k)): v for k, v in data.items()}
        return {
            spec.name: coerce_field(spec, by_key.get(_normalize_key(spec.name)))
            for spec in fields
        }

    if text.strip():
        logger.debug("No JSON object in provider response, using line scan fallback")
    return {spec.name: _fallback_field(text, spec) for spec in fields}


def parse_numbered_list(text: Any) -> List[str]:
    """Items of lines that start with 'N.' or 'N)'."""
    if not isinstance(text, str):
        return []
    items = []
    for line in text.splitlines():
        m = _NUMBERED_LINE_RE.match(line)
        if m:
            items.append(m.group(1).strip())
    return items


def _confidence_from_line(line: str) -> Optional[int]:
    # "Overall confidence level (1-10): 9" -> the value after the colon
    tail = line.rsplit(":", 1)[1] if ":" in line else line
    m = _INT_RE.search(tail) or _INT_RE.search(line)
    return int(m.group()) if m else None


def parse_summary_response(text: Any) -> SummaryResult:
    """
    Split a summary response into summary text, key points and confidence.

    Lines before a "key points" / "main points" heading form the summary.
    Bullet or numbered lines after it are key points. A line mentioning
    "confidence" supplies a 1-10 score (default 8).
    """
    if not isinstance(text, str):
        return SummaryResult()

    summary_lines: List[str] = []
    key_points: List[str] = []
    confidence = 8
    section = "summary"

    for line in (ln for ln in text.splitlines() if ln.strip()):
        lowered = line.lower()
        if "key points" in lowered or "main points" in lowered:
            section = "key_points"
            continue
        if "confidence" in lowered:
            value = _confidence_from_line(line)
            if value is not None:
                confidence = value
            continue
        if section == "summary":
            if lowered.strip().rstrip(":") == "summary":
                continue
            summary_lines.append(line.strip())
        else:
            m = _ITEM_RE.match(line)
            if m:
                key_points.append(m.group(1).strip())

    summary = " ".join(summary_lines).strip()
    return SummaryResult(
        summary=summary,
        key_points=key_points,
        word_count=len(summary.split()),
        confidence=min(10, max(1, confidence)),
    )
