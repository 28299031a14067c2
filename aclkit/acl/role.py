"""A single named role and its resource permissions."""

from typing import Dict, List, Optional, Union

from ..common.logger import get_logger
from .base import Names, as_name_list, compile_match

logger = get_logger("aclkit.role")


class Role:
    """Named role owning a map of resource name to allowed flag.

    A resource that was never set is treated as denied.
    """

    def __init__(self, name: str):
        self._name = name
        self._resources: Dict[str, bool] = {}

    def __repr__(self) -> str:
        return f"Role({self._name!r}, resources={len(self._resources)})"

    @property
    def name(self) -> str:
        """Name of the role."""
        return self._name

    def get_role(self) -> str:
        """Return the role name."""
        return self._name

    def add_resources(self, resources: Names, allowed: bool = True) -> None:
        """Set the permission flag for one or more resources.

        Args:
            resources: A single resource name or a list of names
            allowed: True to allow access, False to deny it

        Raises:
            InvalidArgumentError: If resources is not a str or list of str
        """
        for resource in as_name_list(resources, "resources", "Role.add_resources"):
            self._resources[resource] = allowed

    def remove_resource(self, resource: str) -> Optional[bool]:
        """Remove a resource from this role.

        Args:
            resource: Name of the resource

        Returns:
            True if the resource was removed, None if it was never set
        """
        if resource in self._resources:
            del self._resources[resource]
            logger.debug(f"Removed resource {resource!r} from role {self._name!r}")
            return True
        return None

    def get_resources(
        self, match: Optional[str] = None
    ) -> Union[Dict[str, bool], List[str]]:
        """Return the resources of this role.

        Without a filter the full resource -> allowed mapping is returned.
        With a filter only the matching resource names are returned and the
        allowed flags are dropped.

        Args:
            match: Optional regular expression searched for in each name

        Returns:
            Copy of the mapping, or list of matching names
        """
        if match is None:
            return dict(self._resources)

        pattern = compile_match(match, "Role.get_resources")
        return [name for name in self._resources if pattern.search(name)]

    def has_resource(self, resource: str) -> bool:
        """Check if the resource is set, whether allowed or denied."""
        return resource in self._resources

    def is_allowed(self, resource: str) -> bool:
        """Return the stored flag; resources never set are denied."""
        return self._resources.get(resource, False)

    def is_denied(self, resource: str) -> bool:
        """Return True if the resource is denied or was never set."""
        return not self.is_allowed(resource)
