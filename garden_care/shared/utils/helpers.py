# 📄 File: garden_care/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small everyday tools used across the garden care core, like turning text into a fingerprint,
# tidying up spaces in plant names, and cleaning up the AI's answers before they are read.

# 🧪 Purpose (Technical Summary):
# General purpose utility functions: hashing, ID generation, whitespace cleanup, Markdown code
# fence stripping and order-preserving de-duplication.

# 🔗 Dependencies:
# - hashlib: Hashing functions
# - uuid: Unique identifier generation
# - re: text cleanup

# 🔄 Connected Modules / Calls From:
# Used by: cache key derivation, name normalization, the content generator, SQL repositories

import hashlib
import re
from datetime import datetime, timezone
from typing import Any, Callable, Hashable, Iterable, List, Optional, TypeVar
from uuid import uuid4


T = TypeVar('T')

_WHITESPACE_RE = re.compile(r'\s+')
_CODE_FENCE_OPEN_RE = re.compile(r'^```(?:json)?\s*', re.IGNORECASE)
_CODE_FENCE_CLOSE_RE = re.compile(r'\s*```$')


class HelperError(Exception):
    """Custom exception for helper function errors."""
    pass


# ID and hash generation
def generate_uuid() -> str:
    """Generate a random UUID4 string (used as primary key for stored records)."""
    return str(uuid4())


def generate_hash(data: str, algorithm: str = "sha256") -> str:
    """
    Generate hash of data using specified algorithm.

    Args:
        data: Data to hash
        algorithm: Hash algorithm (sha256, sha512)

    Returns:
        Lowercase hex digest string
    """
    if algorithm not in ['sha256', 'sha512']:
        raise HelperError(f"Unsupported hash algorithm: {algorithm}")

    hash_func = getattr(hashlib, algorithm)
    return hash_func(data.encode('utf-8')).hexdigest()


def utc_now() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


# Text helpers
def clean_whitespace(text: str) -> str:
    """Clean excessive whitespace from text."""
    if not text:
        return text

    # Replace multiple whitespace with single space
    text = _WHITESPACE_RE.sub(' ', text)

    # Strip leading/trailing whitespace
    return text.strip()


def strip_code_fences(text: str) -> str:
    """
    Remove a surrounding Markdown code fence (```json ... ``` or ``` ... ```).

    Language models often wrap JSON answers in a fence even when asked not to.
    """
    if not text:
        return text

    cleaned = text.strip()
    cleaned = _CODE_FENCE_OPEN_RE.sub('', cleaned)
    cleaned = _CODE_FENCE_CLOSE_RE.sub('', cleaned)
    return cleaned.strip()


# List helpers
def deduplicate_list(
    data: Iterable[T],
    key: Optional[Callable[[T], Hashable]] = None
) -> List[T]:
    """
    Remove duplicates from list while preserving first-seen order.

    Args:
        data: Items to deduplicate
        key: Function to extract comparison key

    Returns:
        Deduplicated list
    """
    seen = set()
    result = []

    for item in data:
        comparison_key = key(item) if key else item
        if comparison_key not in seen:
            seen.add(comparison_key)
            result.append(item)

    return result


def is_empty_or_whitespace(value: Any) -> bool:
    """Check if value is None, empty, or only whitespace."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
