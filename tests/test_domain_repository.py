"""
Integration tests for DomainRepository.

These tests verify the repository works correctly with a real database.
"""
import pytest

from cms_domains.domain.entities import Domain, DomainNotFoundError, DuplicateDomainError


async def _seed(uow_provider, *domains):
    async with uow_provider.get_unit_of_work() as uow:
        for domain in domains:
            await uow.domains.add_or_update(domain)
        await uow.commit()
    return domains


@pytest.mark.asyncio
async def test_add_assigns_id_and_retrieves(uow_provider):
    domain = Domain(name="shop.example.com", root_content_id=42, language_iso_code="en-US")
    await _seed(uow_provider, domain)

    assert domain.id is not None

    async with uow_provider.get_unit_of_work(readonly=True) as uow:
        by_id = await uow.domains.get(domain.id)
        by_name = await uow.domains.get_by_name("shop.example.com")

    assert by_id == domain
    assert by_name == domain


@pytest.mark.asyncio
async def test_get_nonexistent_domain(uow_provider):
    async with uow_provider.get_unit_of_work(readonly=True) as uow:
        assert await uow.domains.get(999) is None
        assert await uow.domains.get_by_name("missing.example.com") is None
        assert await uow.domains.exists("missing.example.com") is False


@pytest.mark.asyncio
async def test_exists_matches_exact_name(uow_provider):
    await _seed(uow_provider, Domain(name="example.com", root_content_id=1))

    async with uow_provider.get_unit_of_work(readonly=True) as uow:
        assert await uow.domains.exists("example.com")
        assert not await uow.domains.exists("www.example.com")
        assert not await uow.domains.exists("example.co")


@pytest.mark.asyncio
async def test_update_existing_domain(uow_provider):
    domain = Domain(name="old.example.com", root_content_id=1)
    await _seed(uow_provider, domain)

    domain.name = "new.example.com"
    domain.language_iso_code = "fr-FR"
    await _seed(uow_provider, domain)

    async with uow_provider.get_unit_of_work(readonly=True) as uow:
        assert not await uow.domains.exists("old.example.com")
        stored = await uow.domains.get(domain.id)

    assert stored.name == "new.example.com"
    assert stored.language_iso_code == "fr-FR"


@pytest.mark.asyncio
async def test_update_keeping_own_name_is_not_duplicate(uow_provider):
    domain = Domain(name="example.com", root_content_id=1)
    await _seed(uow_provider, domain)

    domain.root_content_id = 2
    await _seed(uow_provider, domain)

    async with uow_provider.get_unit_of_work(readonly=True) as uow:
        assert (await uow.domains.get(domain.id)).root_content_id == 2


@pytest.mark.asyncio
async def test_duplicate_name_fails(uow_provider):
    await _seed(uow_provider, Domain(name="dup.example.com", root_content_id=1))

    with pytest.raises(DuplicateDomainError, match="already exists"):
        await _seed(uow_provider, Domain(name="dup.example.com", root_content_id=2))


@pytest.mark.asyncio
async def test_rename_onto_existing_name_fails(uow_provider):
    first = Domain(name="one.example.com", root_content_id=1)
    second = Domain(name="two.example.com", root_content_id=2)
    await _seed(uow_provider, first, second)

    second.name = "one.example.com"
    with pytest.raises(DuplicateDomainError):
        await _seed(uow_provider, second)


@pytest.mark.asyncio
async def test_update_missing_domain_fails(uow_provider):
    with pytest.raises(DomainNotFoundError):
        await _seed(uow_provider, Domain(name="ghost.example.com", root_content_id=1, id=123))


@pytest.mark.asyncio
async def test_get_all_filters_wildcards(uow_provider):
    routed = Domain(name="example.com", root_content_id=1)
    wildcard = Domain(name="*1", language_iso_code="da-DK")
    other = Domain(name="example.org", root_content_id=2)
    await _seed(uow_provider, routed, wildcard, other)

    async with uow_provider.get_unit_of_work(readonly=True) as uow:
        without = await uow.domains.get_all(include_wildcards=False)
        with_all = await uow.domains.get_all(include_wildcards=True)

    assert [d.name for d in without] == ["example.com", "example.org"]
    assert [d.name for d in with_all] == ["example.com", "*1", "example.org"]


@pytest.mark.asyncio
async def test_get_assigned_domains(uow_provider):
    await _seed(
        uow_provider,
        Domain(name="a.example.com", root_content_id=10),
        Domain(name="b.example.com", root_content_id=20),
        Domain(name="c.example.com", root_content_id=10),
        Domain(name="*10"),
    )

    async with uow_provider.get_unit_of_work(readonly=True) as uow:
        assigned = await uow.domains.get_assigned_domains(10, include_wildcards=False)
        assigned_all = await uow.domains.get_assigned_domains(10, include_wildcards=True)
        none = await uow.domains.get_assigned_domains(30, include_wildcards=True)

    assert [d.name for d in assigned] == ["a.example.com", "c.example.com"]
    assert [d.name for d in assigned_all] == ["a.example.com", "c.example.com"]
    assert none == []


@pytest.mark.asyncio
async def test_delete(uow_provider):
    domain = Domain(name="gone.example.com", root_content_id=1)
    await _seed(uow_provider, domain)

    async with uow_provider.get_unit_of_work() as uow:
        await uow.domains.delete(domain)
        await uow.commit()

    async with uow_provider.get_unit_of_work(readonly=True) as uow:
        assert not await uow.domains.exists("gone.example.com")


@pytest.mark.asyncio
async def test_delete_unsaved_or_missing_domain_fails(uow_provider):
    async with uow_provider.get_unit_of_work() as uow:
        with pytest.raises(ValueError, match="has not been saved"):
            await uow.domains.delete(Domain(name="new.example.com"))
        with pytest.raises(DomainNotFoundError):
            await uow.domains.delete(Domain(name="ghost.example.com", id=404))
