# ABOUTME: Lenient parsing of the catalog's free-text release dates.
# ABOUTME: Turns strings like "2012年09月07日頃" into a date for sorting; never raises.

import re
import unicodedata
from datetime import date, datetime

# Qualifiers meaning "around", "early", "mid", "late", "after", "planned", "end of".
# Longest first so "発売予定" is removed before "予定".
_ANNOTATION_TOKENS = (
    "発売予定",
    "上旬",
    "初旬",
    "中旬",
    "下旬",
    "以降",
    "予定",
    "頃",
    "末",
)

_STRUCTURED_FORMATS = ("%Y年%m月%d日", "%Y年%m月", "%Y年")

# (minimum digit count, digits consumed, strptime format)
_DIGIT_LAYOUTS = ((8, 8, "%Y%m%d"), (6, 6, "%Y%m"), (4, 4, "%Y"))

_DIGIT_RUN_RE = re.compile(r"\d+")


def _strip_annotations(text: str) -> str:
    for token in _ANNOTATION_TOKENS:
        text = text.replace(token, "")
    return text.strip()


def _parse_structured(text: str) -> date | None:
    for fmt in _STRUCTURED_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _parse_digits(text: str) -> date | None:
    """Read the longest run of digits as YYYYMMDD, YYYYMM, or YYYY, longest layout first.

    Only one contiguous run is considered, so a volume or edition number
    next to the year ("2巻 2015年") never bleeds into it.
    """
    digits = max(_DIGIT_RUN_RE.findall(text), key=len, default="")
    for min_len, take, fmt in _DIGIT_LAYOUTS:
        if len(digits) < min_len:
            continue
        try:
            return datetime.strptime(digits[:take], fmt).date()
        except ValueError:
            continue
    return None


def parse_release_date(raw: str | None) -> date | None:
    """Best-effort conversion of a catalog release date string to a date.

    Tries the catalog's native formats first ("2012年09月07日", "2012年09月",
    "2012年"), then falls back to the longest run of digits in the text. A
    missing month or day defaults to 1. Returns None when nothing plausible
    is found.

    The digit fallback will happily read an unrelated 8-digit number as a
    date, and reads "2012/09/07" as just 2012; both are accepted in exchange
    for matching the many inconsistent formats the upstream field uses.
    """
    if not raw:
        return None

    text = _strip_annotations(unicodedata.normalize("NFKC", raw))
    if not text:
        return None

    return _parse_structured(text) or _parse_digits(text)
