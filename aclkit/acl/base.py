"""Base classes and helpers shared by the ACL implementation.

Defines the interface the access control list implements, the typed
result of a resource/role breakdown, and the argument normalization used
by every operation that accepts a single name or a list of names.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Union

from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from .role import Role


Names = Union[str, Sequence[str]]


@dataclass
class ResourceAccess:
    """Roles partitioned into allowed and denied for a single resource."""

    allowed: List["Role"] = field(default_factory=list)
    denied: List["Role"] = field(default_factory=list)

    def __getitem__(self, key: str) -> List["Role"]:
        if key not in ("allowed", "denied"):
            raise KeyError(key)
        return getattr(self, key)


def as_name(value: str, argument: str, method: str) -> str:
    """Check a single role name, raising InvalidArgumentError if it is not a str."""
    if not isinstance(value, str):
        raise InvalidArgumentError(argument, method, type(value).__name__, "str")
    return value


def as_name_list(value: Names, argument: str, method: str) -> List[str]:
    """Normalize a single name or a list of names to a list.

    Args:
        value: A single name or a list/tuple of names
        argument: Parameter name, used in the error message
        method: Qualified method name, used in the error message

    Returns:
        List of names, in input order

    Raises:
        InvalidArgumentError: If value is not a str or a list/tuple of str
    """
    if isinstance(value, str):
        return [value]

    if not isinstance(value, (list, tuple)):
        raise InvalidArgumentError(argument, method, type(value).__name__)

    for item in value:
        if not isinstance(item, str):
            raise InvalidArgumentError(
                argument, method, f"list of {type(item).__name__}"
            )

    return list(value)


def compile_match(match: str, method: str) -> "re.Pattern[str]":
    """Compile a resource filter pattern, raising InvalidArgumentError on failure."""
    if not isinstance(match, str):
        raise InvalidArgumentError("match", method, type(match).__name__, "str")
    try:
        return re.compile(match)
    except re.error as e:
        raise InvalidArgumentError(
            "match", method, f"invalid pattern: {e}", "regular expression"
        ) from e


class AclInterface(ABC):
    """Abstract interface of an access control list."""

    @abstractmethod
    def get_roles(self) -> Dict[str, "Role"]:
        """Return all roles keyed by name."""

    @abstractmethod
    def add_role(
        self,
        name: str,
        resources: Optional[Names] = None,
        allowed: bool = True,
    ) -> "Role":
        """Add a role, optionally allowing or denying it the given resources."""

    @abstractmethod
    def remove_role(self, name: str) -> bool:
        """Remove a role with all of its resources."""

    @abstractmethod
    def is_allowed(self, role: str, resource: str) -> bool:
        """Return True if the role may access the resource."""

    @abstractmethod
    def is_denied(self, role: str, resource: str) -> bool:
        """Return True if the role may not access the resource."""

    @abstractmethod
    def allow(self, roles: Names, resources: Names) -> "AclInterface":
        """Allow one or more roles access to one or more resources."""

    @abstractmethod
    def deny(self, roles: Names, resources: Names) -> "AclInterface":
        """Deny one or more roles access to one or more resources."""

    @abstractmethod
    def inherit(self, roles: Names, inherits: Names) -> "AclInterface":
        """Copy the resources of the inherited roles onto the given roles."""
