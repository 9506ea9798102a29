"""Tests for the link repository."""

import pytest

from clipurl.models.link import ShortLinkCreate
from clipurl.repositories.link_repository import LinkRepository, DuplicateEntityError
from tests.utils import create_test_link, random_url


@pytest.mark.repository
class TestLinkRepository:
    """Test suite for the record store."""

    @pytest.mark.asyncio
    async def test_insert(self, test_db, link_repository):
        """Test link creation."""
        test_url = random_url()

        link = await link_repository.insert(
            test_db, ShortLinkCreate(original_url=test_url, short_code="created")
        )
        await test_db.commit()

        assert link.id is not None
        assert link.original_url == test_url
        assert link.short_code == "created"

        db_link = await link_repository.find_by_code(test_db, "created")
        assert db_link is not None
        assert db_link.original_url == test_url

    @pytest.mark.asyncio
    async def test_insert_from_dict(self, test_db, link_repository):
        link = await link_repository.insert(
            test_db, {"original_url": "https://example.com", "short_code": "fromdict"}
        )
        assert link.short_code == "fromdict"

    @pytest.mark.asyncio
    async def test_insert_duplicate_short_code(self, test_db, link_repository):
        """Test duplicate short code handling."""
        await create_test_link(test_db, original_url="https://x.com", short_code="duplicate")

        with pytest.raises(DuplicateEntityError) as excinfo:
            await link_repository.insert(
                test_db,
                ShortLinkCreate(original_url="https://y.com", short_code="duplicate")
            )
        await test_db.rollback()

        assert excinfo.value.field_name == "short_code"
        assert excinfo.value.value == "duplicate"
        assert await link_repository.count_by_code(test_db, "duplicate") == 1
        stored = await link_repository.find_by_code(test_db, "duplicate")
        assert stored.original_url == "https://x.com"

    @pytest.mark.asyncio
    async def test_empty_short_code_is_stored(self, test_db, link_repository):
        link = await link_repository.insert(
            test_db, {"original_url": "https://example.com", "short_code": ""}
        )
        await test_db.commit()

        assert link.short_code == ""
        assert (await link_repository.find_by_code(test_db, "")).id == link.id

    @pytest.mark.asyncio
    async def test_find_by_code(self, test_db, link_repository):
        test_link = await create_test_link(test_db, short_code="findme")

        db_link = await link_repository.find_by_code(test_db, "findme")

        assert db_link is not None
        assert db_link.id == test_link.id
        assert db_link.original_url == test_link.original_url

    @pytest.mark.asyncio
    async def test_find_by_code_nonexistent(self, test_db, link_repository):
        assert await link_repository.find_by_code(test_db, "nonexistent") is None

    @pytest.mark.asyncio
    async def test_find_by_code_is_case_sensitive(self, test_db, link_repository):
        await create_test_link(test_db, short_code="Case")
        assert await link_repository.find_by_code(test_db, "case") is None

    @pytest.mark.asyncio
    async def test_count_by_code(self, test_db, link_repository):
        assert await link_repository.count_by_code(test_db, "counted") == 0
        await create_test_link(test_db, short_code="counted")
        assert await link_repository.count_by_code(test_db, "counted") == 1

