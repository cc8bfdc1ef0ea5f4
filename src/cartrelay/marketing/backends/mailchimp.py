"""Mailchimp marketing automation integration."""

import logging
from dataclasses import asdict

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from cartrelay.marketing.backends import (
    CART_MERGE_FIELDS,
    RemoteSubscriber,
    UserMergeFields,
    get_subscriber_hash,
)
from cartrelay.marketing.exceptions import ConnectivityError, RemoteApiError

from .base import BaseBackend

logger = logging.getLogger(__name__)


class MailchimpBackend(BaseBackend):
    """
    Mailchimp marketing automation integration.

    Handles:
    - Audience members subscription and update
    - Member tags, which are only ever added
    - Merge fields used to track abandoned carts

    Credentials default to the MAILCHIMP_API_KEY, MAILCHIMP_SERVER_PREFIX and
    MAILCHIMP_AUDIENCE_ID settings.
    """

    page_size = 1000

    def __init__(
        self,
        api_key: str | None = None,
        server_prefix: str | None = None,
        audience_id: str | None = None,
        timeout: int | None = None,
    ):
        """Configure the Mailchimp backend."""
        self._api_key = api_key or getattr(settings, "MAILCHIMP_API_KEY", None)
        self.server_prefix = server_prefix or getattr(settings, "MAILCHIMP_SERVER_PREFIX", None)
        self.audience_id = audience_id or getattr(settings, "MAILCHIMP_AUDIENCE_ID", None)
        self._timeout = timeout or getattr(settings, "MAILCHIMP_TIMEOUT", 10)

        if not self._api_key or not self.server_prefix or not self.audience_id:
            logger.error("Missing Mailchimp configuration")
            raise ImproperlyConfigured("Mailchimp configuration is missing")

        self.api_url = f"https://{self.server_prefix}.api.mailchimp.com/3.0"

    @property
    def _members_path(self):
        return f"/lists/{self.audience_id}/members"

    def _member_path(self, email):
        return f"{self._members_path}/{get_subscriber_hash(email)}"

    def _request(self, method, path, timeout=None, **kwargs):
        """
        Call the Mailchimp marketing API and return the decoded JSON body.

        Raises:
            RemoteApiError: If no response is received or its status is not a success

        """
        try:
            response = requests.request(
                method,
                f"{self.api_url}{path}",
                auth=("cartrelay", self._api_key),
                timeout=timeout or self._timeout,
                **kwargs,
            )
            response.raise_for_status()
            if response.status_code == requests.codes.no_content or not response.content:
                return {}
            return response.json()
        except requests.RequestException as err:
            raise self._build_error(err) from err

    @staticmethod
    def _build_error(err):
        """Convert a requests exception to a RemoteApiError carrying Mailchimp's problem details."""
        response = err.response
        if response is None:
            return RemoteApiError(f"Mailchimp request failed: {err}")

        try:
            problem = response.json()
        except ValueError:
            problem = {}
        if not isinstance(problem, dict):
            problem = {}

        title = problem.get("title") or response.reason
        detail = problem.get("detail") or response.text
        return RemoteApiError(f"{title}: {detail}", status=response.status_code, title=title, detail=detail)

    def verify_connectivity(self, timeout: int = None) -> None:
        """Ping Mailchimp."""
        try:
            response = self._request("GET", "/ping", timeout)
        except RemoteApiError as err:
            logger.error("Failed to connect to Mailchimp: %s", err.detail)
            raise ConnectivityError(f"Failed to connect to Mailchimp: {err.detail}") from err

        logger.info("Mailchimp connection verified: %s", response.get("health_status"))

    def ensure_schema(self, timeout: int = None) -> None:
        """
        Create the cart merge fields missing from the audience.

        A field created concurrently by someone else is reported by Mailchimp as
        an "Invalid Resource" whose detail says it already exists, which is fine.
        """
        merge_fields_path = f"/lists/{self.audience_id}/merge-fields"
        try:
            response = self._request("GET", merge_fields_path, timeout, params={"count": self.page_size})
        except RemoteApiError as err:
            logger.error("Failed to get list merge fields: %s", err.detail)
            return

        existing_tags = {merge_field.get("tag") for merge_field in response.get("merge_fields", [])}

        for merge_field in CART_MERGE_FIELDS:
            if merge_field.tag in existing_tags:
                logger.info("Merge field %s already exists", merge_field.tag)
                continue

            try:
                self._request("POST", merge_fields_path, timeout, json=asdict(merge_field))
            except RemoteApiError as err:
                if err.status == requests.codes.bad_request and err.title == "Invalid Resource" and (
                    "already exists" in (err.detail or "")
                ):
                    logger.info("Merge field %s already exists", merge_field.tag)
                else:
                    logger.error("Failed to add merge field %s: %s", merge_field.tag, err.detail)
            else:
                logger.info("Added merge field %s", merge_field.tag)

    def add_subscriber(self, email: str, name: str, tags: list[str], timeout: int = None) -> dict:
        """Subscribe a contact to the Mailchimp audience."""
        logger.info("Adding user to Mailchimp list: %s", email)
        payload = {
            "email_address": email,
            "status": "subscribed",
            "merge_fields": UserMergeFields.from_name(name).as_dict(),
            "tags": list(tags),
        }
        try:
            response = self._request("POST", self._members_path, timeout, json=payload)
        except RemoteApiError as err:
            logger.error("Failed to add subscriber to Mailchimp: %s", err.detail)
            raise

        logger.info("Successfully added %s to Mailchimp list", email)
        return response

    def update_subscriber(self, email: str, merge_fields: dict, tags: list[str], timeout: int = None) -> dict:
        """
        Update the merge fields of a member, then mark all the given tags as active.

        Mailchimp ignores tags sent along a member update, they have their own
        endpoint which never removes tags left out of the request.
        """
        logger.info("Updating subscriber in Mailchimp: %s", email)
        member_path = self._member_path(email)
        try:
            response = self._request("PATCH", member_path, timeout, json={"merge_fields": merge_fields})
            self._request(
                "POST",
                f"{member_path}/tags",
                timeout,
                json={"tags": [{"name": tag, "status": "active"} for tag in tags]},
            )
        except RemoteApiError as err:
            logger.error("Failed to update subscriber in Mailchimp: %s", err.detail)
            raise

        logger.info("Successfully updated %s in Mailchimp with tags %s", email, tags)
        return response

    def get_subscriber(self, email: str, timeout: int = None) -> RemoteSubscriber | None:
        """Retrieve a member, None if Mailchimp does not know it."""
        logger.info("Getting subscriber from Mailchimp: %s", email)
        try:
            response = self._request("GET", self._member_path(email), timeout)
        except RemoteApiError as err:
            if err.status == requests.codes.not_found:
                logger.info("Subscriber %s not found in Mailchimp", email)
                return None
            logger.error("Failed to get subscriber from Mailchimp: %s", err.detail)
            raise

        return RemoteSubscriber.from_api(response)

    def list_subscribers(self, timeout: int = None) -> list[RemoteSubscriber]:
        """Retrieve every member of the audience, one page after the other."""
        logger.info("Getting all members from Mailchimp list")
        subscribers = []
        offset = 0
        try:
            while True:
                response = self._request(
                    "GET",
                    self._members_path,
                    timeout,
                    params={"count": self.page_size, "offset": offset},
                )
                members = response.get("members", [])
                subscribers.extend(RemoteSubscriber.from_api(member) for member in members)
                offset += len(members)
                if not members or offset >= response.get("total_items", 0):
                    break
        except RemoteApiError as err:
            logger.error("Failed to get members from Mailchimp list: %s", err.detail)
            raise

        return subscribers

    def get_tags(self, email: str, timeout: int = None) -> list[str]:
        """Retrieve the tag names of a member."""
        try:
            response = self._request(
                "GET",
                f"{self._member_path(email)}/tags",
                timeout,
                params={"count": self.page_size},
            )
        except RemoteApiError as err:
            logger.error("Failed to get member tags: %s", err.detail)
            raise

        return [tag["name"] for tag in response.get("tags", [])]
