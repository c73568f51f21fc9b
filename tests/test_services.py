"""Tests for the service layer."""

import pytest

from spirit_emeraude_api.app.schemas.contact import ContactMessageCreate
from spirit_emeraude_api.app.schemas.product import ProductCreate
from spirit_emeraude_api.app.services.contact_service import ContactService
from spirit_emeraude_api.app.services.gallery_service import GalleryService
from spirit_emeraude_api.app.services.product_service import ProductService, slugify


@pytest.fixture
def product_service(store):
    return ProductService(store.products)


@pytest.mark.parametrize(
    "name, slug",
    [
        ("Sac Élégance Pagne", "sac-elegance-pagne"),
        ("Pochette Soleil d'Afrique", "pochette-soleil-d-afrique"),
        ("  Bandeau   Grâce!  ", "bandeau-grace"),
    ],
)
def test_slugify(name, slug):
    assert slugify(name) == slug


@pytest.mark.asyncio
async def test_create_derives_missing_slug(product_service):
    product = await product_service.create(ProductCreate(name="Sac Émeraude", category="sac", price=1000))
    assert product.slug == "sac-emeraude"


@pytest.mark.asyncio
async def test_create_keeps_given_slug(product_service):
    product = await product_service.create(
        ProductCreate(name="Sac Émeraude", category="sac", price=1000, slug="mon-sac")
    )
    assert product.slug == "mon-sac"


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["!!!", "Сумка", "手提包"])
async def test_name_without_latin_characters_gets_fallback_slug(product_service, name):
    assert slugify(name) == ""
    first = await product_service.create(ProductCreate(name=name, category="sac", price=1))
    second = await product_service.create(ProductCreate(name=name, category="sac", price=1))
    assert first.slug.startswith("produit-")
    assert len(first.slug) > len("produit-")
    assert first.slug != second.slug


@pytest.mark.asyncio
async def test_blank_slug_is_derived(product_service):
    product = await product_service.create(ProductCreate(name="Sac Émeraude", category="sac", price=1, slug="   "))
    assert product.slug == "sac-emeraude"


@pytest.mark.asyncio
async def test_update_derives_slug_too(product_service, store):
    target = store.products.list()[0]
    updated = await product_service.update(target.id, ProductCreate(name="Nouveau Sac", category="sac", price=1))
    assert updated.slug == "nouveau-sac"


@pytest.mark.asyncio
async def test_update_and_delete_missing_record(product_service):
    assert await product_service.update("missing", ProductCreate(name="X", category="sac", price=1)) is None
    assert await product_service.delete("missing") is False


@pytest.mark.asyncio
@pytest.mark.parametrize("category", [None, "", "all"])
async def test_no_filter_values_list_everything(product_service, store, category):
    assert await product_service.list(category) == store.products.list()


@pytest.mark.asyncio
async def test_unknown_category_lists_nothing(product_service):
    assert await product_service.list("chaussure") == []


@pytest.mark.asyncio
async def test_gallery_filter(store):
    service = GalleryService(store.gallery)
    photos = await service.list("atelier")
    assert photos
    assert all(p.category.value == "atelier" for p in photos)


@pytest.mark.asyncio
async def test_contact_submit_logs_without_body(store, caplog):
    service = ContactService(store.contact_messages)
    with caplog.at_level("INFO"):
        message = await service.submit(
            ContactMessageCreate(name="Awa", phone="06123456", message="Message confidentiel ici")
        )
    assert store.contact_messages.list() == [message]
    assert message.id in caplog.text
    assert "confidentiel" not in caplog.text
