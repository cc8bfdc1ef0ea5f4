"""Marketing backends module."""

import hashlib
from dataclasses import dataclass, field

from cartrelay.tools.email import split_name


@dataclass(frozen=True)
class MergeField:
    """Definition of a merge field of the audience."""

    tag: str
    name: str
    type: str = "text"


# Merge fields used to track abandoned carts, created at startup when missing.
CART_MERGE_FIELDS = (
    MergeField(tag="CARTID", name="Cart ID"),
    MergeField(tag="CARTITEMS", name="Cart Items"),
    MergeField(tag="TOTALPRICE", name="Total Price", type="number"),
    MergeField(tag="ABNDNTIME", name="Abandonment Time"),
    MergeField(tag="RETURNURL", name="Return URL"),
)


@dataclass
class UserMergeFields:
    """Merge fields describing a customer."""

    first_name: str
    last_name: str
    email: str | None = None

    @classmethod
    def from_name(cls, name: str, email: str | None = None):
        """Build the merge fields from a full name."""
        first_name, last_name = split_name(name)
        return cls(first_name=first_name, last_name=last_name, email=email)

    def as_dict(self) -> dict[str, str]:
        """Return the merge fields keyed by their audience tag."""
        merge_fields = {"FNAME": self.first_name, "LNAME": self.last_name}
        if self.email is not None:
            merge_fields["EMAIL"] = self.email
        return merge_fields


@dataclass
class CartMergeFields:
    """Merge fields describing the last abandoned cart of a customer."""

    first_name: str
    last_name: str
    cart_id: str
    cart_items: str
    total_price: str
    abandoned_at: str
    return_url: str

    def as_dict(self) -> dict[str, str]:
        """Return the merge fields keyed by their audience tag."""
        return {
            "FNAME": self.first_name,
            "LNAME": self.last_name,
            "CARTID": self.cart_id,
            "CARTITEMS": self.cart_items,
            "TOTALPRICE": self.total_price,
            "ABNDNTIME": self.abandoned_at,
            "RETURNURL": self.return_url,
        }


@dataclass
class RemoteSubscriber:
    """A member of the audience as known by the marketing platform."""

    id: str
    email_address: str
    status: str | None = None
    merge_fields: dict = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, payload: dict):
        """Build a subscriber from a list member payload."""
        return cls(
            id=payload.get("id", ""),
            email_address=payload.get("email_address", ""),
            status=payload.get("status"),
            merge_fields=payload.get("merge_fields") or {},
            tags=[tag["name"] for tag in payload.get("tags") or []],
        )


def get_subscriber_hash(email: str) -> str:
    """Return the MD5 hex digest of the lowercased email, identifying a list member."""
    return hashlib.md5(email.lower().encode(), usedforsecurity=False).hexdigest()


def union_tags(existing_tags, new_tags) -> list[str]:
    """Merge two tag lists without duplicates, existing tags first."""
    return list(dict.fromkeys([*existing_tags, *new_tags]))
