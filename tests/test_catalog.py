import pytest

from kitchen import crud, errors
from kitchen.menu_data import DEFAULT_MENU_ITEMS


def test_available_listing_hides_unavailable_items(session, menu):
    hidden = crud.create_menu_item(session, {"name": "Soup", "price": 150, "category": "Starters"})

    available = [item.id for item in crud.list_menu_items(session, available_only=True)]
    everything = [item.id for item in crud.list_menu_items(session)]

    assert hidden.id not in available
    assert everything == [menu["risotto"], menu["wings"], hidden.id]


def test_create_assigns_identifier(session):
    item = crud.create_menu_item(
        session,
        {
            "name": "Paneer Tikka",
            "description": "Spiced cottage cheese",
            "price": 380,
            "category": "Mains",
            "image_url": "https://example.com/paneer.jpg",
            "is_veg": True,
            "is_available": True,
        },
    )
    assert item.id is not None
    assert crud.get_menu_item(session, item.id).name == "Paneer Tikka"


def test_missing_flags_are_coerced_to_false(session):
    item = crud.create_menu_item(
        session, {"name": "Lassi", "price": 90, "is_veg": None}
    )
    assert item.is_veg is False
    assert item.is_available is False


def test_flags_accept_truthy_strings_and_numbers(session):
    item = crud.create_menu_item(
        session, {"name": "Lassi", "price": 90, "is_veg": "true", "is_available": 1}
    )
    assert item.is_veg is True
    assert item.is_available is True


def test_replace_overwrites_every_field(session, menu):
    updated = crud.replace_menu_item(
        session,
        menu["risotto"],
        {"name": "Mushroom Risotto", "price": 480, "category": "Specials", "is_available": True},
    )
    assert updated.name == "Mushroom Risotto"
    assert updated.price == 480
    assert updated.category == "Specials"
    assert updated.is_veg is False
    assert updated.description == ""


def test_replace_unknown_item_raises_not_found(session):
    with pytest.raises(errors.NotFoundError):
        crud.replace_menu_item(session, 404, {"name": "Ghost", "price": 1})


def test_negative_price_is_accepted(session):
    item = crud.create_menu_item(session, {"name": "Voucher", "price": -50})
    assert item.price == -50


def test_empty_name_is_rejected(session):
    with pytest.raises(errors.ValidationError) as exc_info:
        crud.create_menu_item(session, {"name": "", "price": 10})
    assert exc_info.value.field == "name"
    assert crud.list_menu_items(session) == []


def test_default_menu_is_seeded_once(session):
    crud.ensure_default_menu_items(session)
    crud.ensure_default_menu_items(session)

    items = crud.list_menu_items(session, available_only=True)
    assert len(items) == len(DEFAULT_MENU_ITEMS)
    assert items[0].price == 450
    assert items[1].price == 320


def test_seeding_skips_non_empty_catalog(session, menu):
    crud.ensure_default_menu_items(session)
    assert len(crud.list_menu_items(session)) == 2


def test_replace_with_id_beyond_integer_range_is_not_found(session):
    with pytest.raises(errors.NotFoundError):
        crud.replace_menu_item(session, 2**70, {"name": "Ghost", "price": 1})


def test_price_beyond_integer_range_is_rejected(session):
    with pytest.raises(errors.ValidationError) as exc_info:
        crud.create_menu_item(session, {"name": "Gold Leaf", "price": 2**63})
    assert exc_info.value.field == "price"
    assert crud.list_menu_items(session) == []
