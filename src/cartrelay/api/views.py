"""API views receiving storefront events."""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from cartrelay.services.carts import AbandonedCartService
from cartrelay.services.users import UserService

from . import serializers


class UserListView(APIView):
    """Register users and list the ones registered locally."""

    service_class = UserService

    def get(self, request):
        """List the users registered locally."""
        users = self.service_class().list_users()
        return Response(serializers.UserSerializer(users, many=True).data)

    def post(self, request):
        """Register a user and subscribe it to the audience."""
        serializer = serializers.UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = self.service_class().register_user(**serializer.validated_data)
        return Response(serializers.UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):
    """Update a user identified by its email."""

    service_class = UserService

    def put(self, request, email):
        """Update the name and/or email of a user, then its audience member."""
        serializer = serializers.UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = self.service_class().update_user(
            email,
            name=serializer.validated_data.get("name"),
            new_email=serializer.validated_data.get("email"),
        )
        return Response(serializers.UserSerializer(user).data)


class RemoteUserListView(APIView):
    """List the members of the Mailchimp audience."""

    service_class = UserService

    def get(self, request):
        """List the audience members."""
        subscribers = self.service_class().list_remote_users()
        return Response(serializers.RemoteSubscriberSerializer(subscribers, many=True).data)


class VerifyMailchimpView(APIView):
    """Check the connection to Mailchimp."""

    service_class = UserService

    def get(self, request):
        """Ping Mailchimp."""
        self.service_class().verify_connection()
        return Response({"message": "Mailchimp connection verified"})


class AbandonedCartView(APIView):
    """Receive abandoned carts."""

    service_class = AbandonedCartService

    def get(self, request):
        """Tell the route is up."""
        return Response("Abandoned cart route is working")

    def post(self, request):
        """Record the abandoned cart on the audience member of the customer."""
        serializer = serializers.AbandonedCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        response = self.service_class().record_abandoned_cart(serializer.save())
        return Response(response, status=status.HTTP_201_CREATED)
