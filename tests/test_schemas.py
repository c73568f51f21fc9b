"""Validation rules of the payload schemas."""

import pytest
from pydantic import ValidationError

from spirit_emeraude_api.app.schemas.contact import ContactMessageCreate
from spirit_emeraude_api.app.schemas.formation import FormationCreate
from spirit_emeraude_api.app.schemas.gallery import GalleryPhotoCreate
from spirit_emeraude_api.app.schemas.impact import ImpactCreate
from spirit_emeraude_api.app.schemas.product import ProductCreate, ProductRead

VALID_CONTACT = {
    "name": "Awa",
    "phone": "+242 06 123 45 67",
    "email": "awa@example.com",
    "subject": "Commande",
    "message": "Bonjour, je souhaite commander un sac.",
}


def test_contact_accepts_valid_payload():
    message = ContactMessageCreate(**VALID_CONTACT)
    assert message.email == "awa@example.com"


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", "A"),
        ("phone", "0612345"),
        ("message", "123456789"),
        ("email", "not-an-email"),
    ],
)
def test_contact_rejects_invalid_field(field, value):
    with pytest.raises(ValidationError) as exc_info:
        ContactMessageCreate(**{**VALID_CONTACT, field: value})
    assert exc_info.value.errors()[0]["loc"] == (field,)


def test_contact_blank_optional_fields_become_none():
    message = ContactMessageCreate(**{**VALID_CONTACT, "email": "", "subject": "  "})
    assert message.email is None
    assert message.subject is None


def test_contact_whitespace_does_not_count_towards_length():
    with pytest.raises(ValidationError):
        ContactMessageCreate(**{**VALID_CONTACT, "name": " A "})


def test_product_rejects_unknown_category():
    with pytest.raises(ValidationError):
        ProductCreate(name="Sac", category="chaussure", price=1000)


def test_product_rejects_negative_price():
    with pytest.raises(ValidationError):
        ProductCreate(name="Sac", category="sac", price=-1)


def test_product_accepts_camel_case_aliases():
    product = ProductCreate.model_validate(
        {"name": "Sac", "category": "sac", "price": 1000, "isFeatured": True, "inStock": False}
    )
    assert product.is_featured is True
    assert product.in_stock is False
    assert product.slug is None


def test_read_model_normalizes_upstream_id():
    product = ProductRead.model_validate(
        {
            "_id": "65f0c2",
            "name": "Sac",
            "category": "sac",
            "price": 1000,
            "description": "",
            "images": [],
            "isFeatured": False,
            "inStock": True,
            "slug": "sac",
        }
    )
    assert product.id == "65f0c2"


def test_read_model_serializes_camel_case():
    product = ProductRead(
        id="1", name="Sac", category="sac", price=1, description="", images=[],
        is_featured=True, in_stock=True, slug="sac",
    )
    dumped = product.model_dump(by_alias=True)
    assert dumped["isFeatured"] is True
    assert "is_featured" not in dumped


def test_impact_requires_an_image():
    with pytest.raises(ValidationError):
        ImpactCreate(name="Don", images=[], date="2024-09-05")


def test_gallery_rejects_unknown_category():
    with pytest.raises(ValidationError):
        GalleryPhotoCreate(category="workshop", image_url="/x.png")


def test_gallery_rejects_blank_image_url():
    with pytest.raises(ValidationError):
        GalleryPhotoCreate(category="autre", image_url="   ")


@pytest.mark.parametrize(
    "model, payload",
    [
        (ProductCreate, {"name": "  ", "category": "sac", "price": 1}),
        (FormationCreate, {"name": "\t", "price": 1}),
        (ImpactCreate, {"name": " ", "images": ["/x.png"], "date": "2024-09-05"}),
    ],
)
def test_blank_names_are_rejected(model, payload):
    with pytest.raises(ValidationError):
        model(**payload)


def test_payload_strings_are_stripped():
    photo = GalleryPhotoCreate(name=" Atelier ", category="atelier", image_url=" /a.png ")
    assert (photo.name, photo.image_url) == ("Atelier", "/a.png")


def test_product_read_requires_a_slug():
    with pytest.raises(ValidationError):
        ProductRead(
            id="1", name="Sac", category="sac", price=1, description="", images=[],
            is_featured=False, in_stock=True, slug="",
        )
