"""Test the marketing data types and helpers."""

import hashlib

from cartrelay.marketing.backends import (
    CART_MERGE_FIELDS,
    CartMergeFields,
    RemoteSubscriber,
    UserMergeFields,
    get_subscriber_hash,
    union_tags,
)


def test_subscriber_hash_is_md5_of_lowercased_email():
    """Test the hash is the lowercase hex MD5 digest of the lowercased email."""
    expected = hashlib.md5(b"foo@bar.com").hexdigest()  # noqa: S324

    assert get_subscriber_hash("foo@bar.com") == expected
    assert len(expected) == 32
    assert expected == expected.lower()


def test_subscriber_hash_ignores_case():
    """Test the hash does not depend on the email case and is stable."""
    assert get_subscriber_hash("Foo@Bar.com") == get_subscriber_hash("foo@bar.com")
    assert get_subscriber_hash("FOO@BAR.COM") == get_subscriber_hash("Foo@Bar.com")


def test_union_tags_deduplicates():
    """Test tags present in both lists are sent once."""
    assert set(union_tags(["A", "B"], ["B", "C"])) == {"A", "B", "C"}
    assert set(union_tags(["B", "C"], ["A", "B"])) == {"A", "B", "C"}
    assert len(union_tags(["A", "B"], ["B", "C"])) == 3


def test_union_tags_keeps_existing_first():
    """Test existing tags come first and the union is idempotent."""
    tags = union_tags(["VIP", "Abandoned Cart"], ["Abandoned Cart"])

    assert tags == ["VIP", "Abandoned Cart"]
    assert union_tags(tags, ["Abandoned Cart"]) == tags


def test_user_merge_fields_from_name():
    """Test the user merge fields split the name."""
    assert UserMergeFields.from_name("Jane van der Berg").as_dict() == {"FNAME": "Jane", "LNAME": "van der Berg"}


def test_user_merge_fields_with_email():
    """Test the email merge field is only sent when known."""
    merge_fields = UserMergeFields.from_name("Jane Doe", email="jane@example.com")

    assert merge_fields.as_dict() == {"FNAME": "Jane", "LNAME": "Doe", "EMAIL": "jane@example.com"}


def test_cart_merge_fields():
    """Test the cart merge fields use the audience tags."""
    merge_fields = CartMergeFields(
        first_name="Jane",
        last_name="Doe",
        cart_id="cart-1",
        cart_items="Shoe (2) - $9.5",
        total_price="19",
        abandoned_at="2024-05-01T10:00:00Z",
        return_url="https://shop.example.com/cart",
    )

    assert merge_fields.as_dict() == {
        "FNAME": "Jane",
        "LNAME": "Doe",
        "CARTID": "cart-1",
        "CARTITEMS": "Shoe (2) - $9.5",
        "TOTALPRICE": "19",
        "ABNDNTIME": "2024-05-01T10:00:00Z",
        "RETURNURL": "https://shop.example.com/cart",
    }


def test_cart_merge_fields_definitions():
    """Test every cart merge field sent is provisioned."""
    assert [merge_field.tag for merge_field in CART_MERGE_FIELDS] == [
        "CARTID",
        "CARTITEMS",
        "TOTALPRICE",
        "ABNDNTIME",
        "RETURNURL",
    ]
    assert {merge_field.type for merge_field in CART_MERGE_FIELDS} == {"text", "number"}


def test_remote_subscriber_from_api():
    """Test a list member payload is converted to a subscriber."""
    subscriber = RemoteSubscriber.from_api(
        {
            "id": "abc",
            "email_address": "jane@example.com",
            "status": "subscribed",
            "merge_fields": {"FNAME": "Jane"},
            "tags": [{"id": 1, "name": "VIP"}, {"id": 2, "name": "New-customer"}],
            "stats": {},
        }
    )

    assert subscriber == RemoteSubscriber(
        id="abc",
        email_address="jane@example.com",
        status="subscribed",
        merge_fields={"FNAME": "Jane"},
        tags=["VIP", "New-customer"],
    )
