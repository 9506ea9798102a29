"""Basic tests to verify test DB setup."""

import pytest
from sqlalchemy import select, text

from clipurl.models.link import ShortLink


@pytest.mark.asyncio
async def test_create_tables(test_db):
    """Verify the short_links table is created and usable."""
    result = await test_db.execute(text("SELECT name FROM sqlite_master WHERE type='table' AND name='short_links'"))
    tables = [row[0] for row in result.fetchall()]
    assert "short_links" in tables

    link = ShortLink(original_url="https://example.com", short_code="test123")
    test_db.add(link)
    await test_db.commit()

    result = await test_db.execute(select(ShortLink).where(ShortLink.short_code == "test123"))
    retrieved = result.scalars().first()

    assert retrieved is not None
    assert retrieved.original_url == "https://example.com"
    assert retrieved.id is not None
    assert retrieved.created_at is not None


@pytest.mark.asyncio
async def test_short_code_has_unique_index(test_db):
    """The unique index is what arbitrates alias conflicts."""
    result = await test_db.execute(text("PRAGMA index_list('short_links')"))
    unique_indexes = [row[1] for row in result.fetchall() if row[2] == 1]
    assert unique_indexes

    columns = set()
    for index_name in unique_indexes:
        info = await test_db.execute(text(f"PRAGMA index_info('{index_name}')"))
        columns.update(row[2] for row in info.fetchall())
    assert "short_code" in columns


@pytest.mark.asyncio
async def test_database_create_all_on_file(file_database):
    async with file_database.session() as session:
        result = await session.execute(text("SELECT COUNT(*) FROM short_links"))
        assert result.scalar_one() == 0
