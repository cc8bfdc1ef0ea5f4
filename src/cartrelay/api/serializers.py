"""Serializers validating storefront payloads."""

from rest_framework import serializers

from cartrelay.services.carts import AbandonedCart, CartItem
from cartrelay.tools.email import is_valid_email

USER_REQUIRED_MESSAGES = dict.fromkeys(("required", "blank", "null"), "Name and email are required")


def validate_email_format(value):
    """Reject emails which are not a single `local@domain.tld` token."""
    if not is_valid_email(value):
        raise serializers.ValidationError("Invalid email format")
    return value


class UserSerializer(serializers.Serializer):
    """Local user representation."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
    signupDate = serializers.DateTimeField(source="signup_date", read_only=True)  # noqa: N815


class UserRegistrationSerializer(serializers.Serializer):
    """Payload registering a user."""

    name = serializers.CharField(trim_whitespace=False, error_messages=USER_REQUIRED_MESSAGES)
    email = serializers.CharField(
        trim_whitespace=False,
        validators=[validate_email_format],
        error_messages=USER_REQUIRED_MESSAGES,
    )


class UserUpdateSerializer(serializers.Serializer):
    """Payload updating a user, every field is optional."""

    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)

    def validate_email(self, value):
        """Validate the new email only when one is given."""
        if value:
            validate_email_format(value)
        return value


class RemoteSubscriberSerializer(serializers.Serializer):
    """Audience member representation."""

    id = serializers.CharField(read_only=True)
    email_address = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True, allow_null=True)
    merge_fields = serializers.DictField(read_only=True)
    tags = serializers.ListField(child=serializers.CharField(), read_only=True)


class CartItemSerializer(serializers.Serializer):
    """A product left in the cart."""

    name = serializers.CharField()
    quantity = serializers.IntegerField(min_value=0)
    price = serializers.FloatField()


class AbandonedCartSerializer(serializers.Serializer):
    """Abandoned cart event sent by the storefront."""

    email = serializers.CharField(
        trim_whitespace=False,
        validators=[validate_email_format],
        error_messages=dict.fromkeys(("required", "blank", "null"), "Email is required"),
    )
    customerName = serializers.CharField(source="customer_name", allow_blank=True)  # noqa: N815
    cartId = serializers.CharField(source="cart_id")  # noqa: N815
    cartItems = CartItemSerializer(source="items", many=True, allow_empty=True)  # noqa: N815
    totalPrice = serializers.FloatField(source="total_price")  # noqa: N815
    abandonmentTimestamp = serializers.CharField(source="abandoned_at")  # noqa: N815
    returnUrl = serializers.CharField(source="return_url")  # noqa: N815
    tags = serializers.ListField(child=serializers.CharField(), required=False)

    def create(self, validated_data):
        """Build the abandoned cart, tagged "Abandoned Cart" unless tags are given."""
        items = [CartItem(**item) for item in validated_data.pop("items")]
        return AbandonedCart(items=items, **validated_data)
