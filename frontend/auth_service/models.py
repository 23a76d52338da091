"""
Auth data shapes exchanged with the API.

Credentials exist only for the duration of a submit. User is read once from an
auth response and is not cached across page loads.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str
    name: Optional[str] = None

    def to_payload(self, include_name: bool = True) -> Dict[str, Any]:
        """
        Build the JSON body for /api/auth/register or /api/auth/login.

        Args:
            include_name (bool): False for login, which takes only email/password.
        """
        payload: Dict[str, Any] = {"email": self.email, "password": self.password}
        if include_name:
            payload["name"] = self.name
        return payload


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=str(data.get("id", "")),
            email=data.get("email", ""),
            name=data.get("name"),
            avatar_url=data.get("avatar_url"),
        )

    @property
    def display_name(self) -> str:
        return self.name or self.email
