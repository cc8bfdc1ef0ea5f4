"""API URL configuration."""

from django.urls import path

from . import views

urlpatterns = [
    path("users", views.UserListView.as_view(), name="users"),
    path("users/mailchimp", views.RemoteUserListView.as_view(), name="users-mailchimp"),
    path("users/verify-mailchimp", views.VerifyMailchimpView.as_view(), name="users-verify-mailchimp"),
    path("users/<path:email>", views.UserDetailView.as_view(), name="user-detail"),
    path("abandoned-cart", views.AbandonedCartView.as_view(), name="abandoned-cart"),
]
