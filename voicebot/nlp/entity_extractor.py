"""Rule-based entity extraction for dates, numbers, emails and phone numbers.

Parsing rules:
- Every rule runs independently and unconditionally over the original-case
  text, so email and phone formatting survive.
- `numbers` is a find-all scan in appearance order (duplicates kept); every
  other rule keeps the first match only.

Determinism:
- Patterns are compiled once when an `EntityExtractor` is built and only read
  afterwards, so one instance can be shared across threads.

Failure handling:
- No rule raises. A rule without a match simply leaves its key out of the
  returned mapping.
"""

import re

from voicebot.core.types import ExtractedEntities


# =========================================================
# PATTERNS
# =========================================================

DATE_PATTERN = (
    r"(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})"
    r"|(\d{1,2}\s+(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\s+\d{2,4})"
)
NUMBER_PATTERN = r"\b\d+\b"
EMAIL_PATTERN = r"[\w.-]+@[\w.-]+\.\w+"
PHONE_PATTERN = r"(\+?\d{1,3}[-.\s]?)?(\(?\d{3}\)?[-.\s]?)?\d{3}[-.\s]?\d{4}"


class EntityExtractor:
    """Stateless evaluator over a fixed set of compiled entity patterns."""

    def __init__(self):
        self._date = re.compile(DATE_PATTERN, re.IGNORECASE)
        self._number = re.compile(NUMBER_PATTERN)
        self._email = re.compile(EMAIL_PATTERN)
        self._phone = re.compile(PHONE_PATTERN)

    def extract(self, text: str) -> ExtractedEntities:
        """
        Extract entities from `text`.

        Returns:
        - Mapping with any of `date`, `numbers`, `email`, `phone`.

        Edge cases:
        - Empty text returns an empty mapping.
        - A phone-shaped digit run can also appear inside `numbers`; the rules
          do not suppress each other.
        """
        entities: ExtractedEntities = {}

        if not text:
            return entities

        date_match = self._date.search(text)
        if date_match:
            entities["date"] = date_match.group(0)

        numbers = self._number.findall(text)
        if numbers:
            entities["numbers"] = numbers

        email_match = self._email.search(text)
        if email_match:
            entities["email"] = email_match.group(0)

        phone_match = self._phone.search(text)
        if phone_match:
            entities["phone"] = phone_match.group(0)

        return entities
