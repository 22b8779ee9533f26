"""Heading-based extraction of named sections from free-text model output.

Each :class:`SectionRule` names one field, the heading synonyms that open it
and the headings that close it. A section body runs from just after its
heading (an optional ``:`` or ``-`` and whitespace are skipped) up to the
first blank line or the first line starting with one of its terminators.
A rule with no terminators captures everything to the end of the text.
Headings are matched case-insensitively anywhere in the text; the first
occurrence wins.
"""

import re
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple


class SectionRule(NamedTuple):
    field: str
    synonyms: Tuple[str, ...]
    terminators: Tuple[str, ...] = ()


SOIL_IMAGE_SECTIONS: Tuple[SectionRule, ...] = (
    SectionRule("condition", ("Soil condition", "Condition"), ("Climate", "Recommended")),
    SectionRule("climate", ("Climate snapshot", "Climate"), ("Recommended", "Rotation")),
    SectionRule("recommended", ("Recommended crops", "Crops"), ("Rotation",)),
    SectionRule("rotation", ("Rotation plan", "Rotation")),
)

_LIST_ITEM_SPLIT = re.compile(r",|•|\s{2,}")
_LINE_ITEM_SPLIT = re.compile(r"\n|•")


def compile_rule(rule: SectionRule) -> re.Pattern:
    heading = "(" + "|".join(re.escape(s) for s in rule.synonyms) + r")[:\-]?\s*"
    if rule.terminators:
        stops = ["\n\n"] + ["\n" + re.escape(t) for t in rule.terminators]
        body = "(.*?)(?:" + "|".join(stops) + ")"
    else:
        body = "(.*)"
    return re.compile(heading + body, re.IGNORECASE | re.DOTALL)


def extract_section(text: str, rule: SectionRule) -> Optional[str]:
    """Return the raw body of ``rule``'s section, or ``None`` if no heading matched."""
    match = compile_rule(rule).search(text)
    if match is None:
        return None
    return match.group(2)


def extract_sections(
    text: str, rules: Sequence[SectionRule] = SOIL_IMAGE_SECTIONS
) -> Dict[str, Optional[str]]:
    return {rule.field: extract_section(text, rule) for rule in rules}


def split_list_items(body: str, limit: int = 3) -> List[str]:
    # Comma / bullet / wide-gap separated, e.g. "* Maize, Soybean  Wheat".
    flattened = re.sub(r"\n|\*", " ", body)
    items = [item.strip() for item in _LIST_ITEM_SPLIT.split(flattened)]
    return [item for item in items if item][:limit]


def split_line_items(body: str, limit: int = 3) -> List[str]:
    items = [item.strip() for item in _LINE_ITEM_SPLIT.split(body)]
    return [item for item in items if item][:limit]
