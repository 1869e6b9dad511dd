# jd_parsing.py - Job description parsing patterns and field extractors
import re
from typing import Dict, List, Optional

from .constants import SOURCE_KEYWORDS
from .helpers import clean_text, split_lines

# ---------- Role ----------
# A line mentioning the title label anywhere
TITLE_LINE_REGEX = re.compile(r"job title|position", re.I)
# Leading "Job Title:" / "Position -" label
TITLE_LABEL_REGEX = re.compile(r"^(?:job title|position)\s*[:\-]\s*", re.I)
# Leading recruiting phrase; alternation order matters
HIRING_PREFIX_REGEX = re.compile(r"^(?:hiring for|we are hiring for|we are hiring)\s*", re.I)
# "... at Acme" tail that belongs to the company, not the role
ROLE_AT_COMPANY_REGEX = re.compile(r"\s+at\s+(?=[A-Z])")

# ---------- Company ----------
COMPANY_LINE_REGEX = re.compile(r"^company\s*[:\-]", re.I)
COMPANY_SEPARATOR_REGEX = re.compile(r"[:\-]")
# "at Initech Solutions" style mention, case-sensitive on purpose
COMPANY_AT_REGEX = re.compile(r"\bat\s+([A-Z][A-Za-z0-9&().,\- ]{2,59})")
# Cut at the first ". "; names with initials ("J. P. Morgan") keep only the first initial
SENTENCE_END_REGEX = re.compile(r"\.\s")

# ---------- Years of experience ----------
YOE_RANGE_REGEX = re.compile(r"(\d+)\s*-\s*(\d+)\s*(?:years?|yrs?|yr)", re.I)
YOE_SINGLE_REGEX = re.compile(r"(\d+)\+?\s*(?:years?|yrs?|yr)", re.I)

# ---------- Pay ----------
# No word boundary before the prefix, so "years." reads as "rs."
PAY_REGEX = re.compile(
    r"(?:₹|rs\.?|inr|usd|\$)\s?[\d.,]+"
    r"(?:\s*-\s*[\d.,]+)?"
    r"\s*(?:lpa|pa|per annum|month|mo)?",
    re.I,
)
PAY_LPA_REGEX = re.compile(r"[\d.,]+\s*(?:lpa|LPA)")

# ---------- Link ----------
LINK_REGEX = re.compile(r"https?://\S+")
LINK_TRAILING_REGEX = re.compile(r"[).,]$")


# ---------- field extractors ----------
def parse_role(lines: List[str]) -> Optional[str]:
    """Title-labelled line if any, else the first line, minus label and hiring phrase."""
    title_line = next((l for l in lines if TITLE_LINE_REGEX.search(l)), None)
    if title_line is None:
        title_line = lines[0] if lines else None
    if not title_line:
        return None

    role = TITLE_LABEL_REGEX.sub("", title_line, count=1)
    role = HIRING_PREFIX_REGEX.sub("", role, count=1)
    # "Senior Data Analyst at Initech ..." -> "Senior Data Analyst"
    role = ROLE_AT_COMPANY_REGEX.split(role, maxsplit=1)[0]
    return role


def parse_company(text: str, lines: List[str]) -> Optional[str]:
    company_line = next((l for l in lines if COMPANY_LINE_REGEX.match(l)), None)
    if company_line is not None:
        parts = COMPANY_SEPARATOR_REGEX.split(company_line, maxsplit=1)
        value = parts[1].strip() if len(parts) > 1 else ""
        return value or None

    m = COMPANY_AT_REGEX.search(text)
    if not m:
        return None
    value = SENTENCE_END_REGEX.split(m.group(1), maxsplit=1)[0]
    value = value.strip().rstrip(" .,-")
    return value or None


def parse_years_experience(text: str) -> Optional[str]:
    # "3-5 years" beats "3+ years"
    m = YOE_RANGE_REGEX.search(text)
    if m:
        return f"{m.group(1)}-{m.group(2)}"
    m = YOE_SINGLE_REGEX.search(text)
    if m:
        return m.group(1)
    return None


def parse_pay(text: str) -> Optional[str]:
    """First currency-prefixed amount, else a bare "12 LPA"; returned verbatim."""
    m = PAY_REGEX.search(text) or PAY_LPA_REGEX.search(text)
    if m:
        return m.group(0).strip()
    return None


def parse_source(lower: str) -> Optional[str]:
    for needles, name in SOURCE_KEYWORDS:
        if any(n in lower for n in needles):
            return name
    return None


def parse_link(text: str) -> Optional[str]:
    m = LINK_REGEX.search(text)
    if m:
        return LINK_TRAILING_REGEX.sub("", m.group(0))
    return None


def parse_jd(jd: str) -> Dict[str, str]:
    """
    Best-effort extraction of role, company, yoe, pay, source and link from a
    pasted job description. Fields that could not be found are left out so the
    result can be merged over an existing form without clobbering it.
    """
    cleaned = clean_text(jd)
    lines = split_lines(cleaned)
    lower = cleaned.lower()

    candidates = {
        "role": parse_role(lines),
        "company": parse_company(cleaned, lines),
        "yoe": parse_years_experience(cleaned),
        "pay": parse_pay(cleaned),
        "source": parse_source(lower),
        "link": parse_link(cleaned),
    }

    result: Dict[str, str] = {}
    for key, value in candidates.items():
        if value is not None:
            result[key] = value
    return result
