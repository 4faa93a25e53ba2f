# events/sanitizers.py
"""
Input sanitization for event and booking content.

Free text from the public booking form and from operators passes through
these functions before it is stored.
"""
import re
from typing import Optional

import bleach


# Allowed HTML tags for event descriptions
ALLOWED_TAGS = [
    'p', 'br', 'strong', 'em', 'u', 'a', 'ul', 'ol', 'li',
    'h1', 'h2', 'h3', 'h4', 'blockquote', 'code', 'pre'
]

ALLOWED_ATTRIBUTES = {
    'a': ['href', 'title'],
}

CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')


def sanitize_text(text: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize plain text input.

    - Strips leading/trailing whitespace
    - Removes control characters (newlines and tabs survive)
    - Truncates to max_length
    """
    if text is None:
        return ""

    text = CONTROL_CHARS.sub('', text.strip())

    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_line(text: Optional[str], max_length: Optional[int] = None) -> str:
    """Single-line variant for titles, names and identifiers."""
    text = sanitize_text(text, max_length=max_length)
    return re.sub(r'\s+', ' ', text)


def sanitize_description(description: Optional[str]) -> str:
    """Event descriptions may carry basic formatting; everything else is stripped."""
    if description is None:
        return ""

    return bleach.clean(
        description.strip(),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        strip=True,
    )
