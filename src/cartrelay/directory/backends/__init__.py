"""Directory backends module."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """A storefront customer known to the relay."""

    id: int
    name: str
    email: str
    signup_date: datetime
