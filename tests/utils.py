"""Test utilities for ClipURL tests."""

import random
import string
from typing import Optional

from clipurl.models.link import ShortLink

TEST_BASE_URL = "http://testserver"


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    return f"https://{random_string(8)}.com/{random_string(12)}"


async def create_test_link(
    db,
    original_url: Optional[str] = None,
    short_code: Optional[str] = None,
) -> ShortLink:
    """Create and persist a test ShortLink in the database."""
    link = ShortLink(
        original_url=original_url or random_url(),
        short_code=short_code if short_code is not None else random_string(6),
    )
    db.add(link)
    await db.commit()
    await db.refresh(link)
    return link
