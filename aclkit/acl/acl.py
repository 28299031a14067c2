"""In-memory access control list.

The Acl is the single entry point for permission queries and mutations.
It creates and exclusively owns the Role instances it manages; roles are
created lazily when first referenced by allow, deny or add_role.
"""

from typing import Dict, List, Optional

from ..common.logger import get_logger
from .base import AclInterface, Names, ResourceAccess, as_name, as_name_list, compile_match
from .role import Role

logger = get_logger("aclkit.acl")


class Acl(AclInterface):
    """Registry of roles and their resource permissions."""

    def __init__(self) -> None:
        self._roles: Dict[str, Role] = {}

    def __repr__(self) -> str:
        return f"Acl(roles={list(self._roles)!r})"

    def get_roles(self) -> Dict[str, Role]:
        """Return all roles keyed by name.

        The returned dict is a snapshot; the Role objects in it are live.
        """
        return dict(self._roles)

    def get_role(self, name: str) -> Optional[Role]:
        """Return a single role, or None if it does not exist."""
        return self._roles.get(as_name(name, "name", "Acl.get_role"))

    def add_role(
        self,
        name: str,
        resources: Optional[Names] = None,
        allowed: bool = True,
    ) -> Role:
        """Add a new role, replacing any existing role with the same name.

        Arguments are validated before the Acl is changed.

        Args:
            name: The role name
            resources: Optional resources the role is allowed or denied
            allowed: True to allow the given resources, False to deny them

        Returns:
            The created role

        Raises:
            InvalidArgumentError: If name is not a str, or resources is not
                a str or list of str
        """
        name = as_name(name, "name", "Acl.add_role")
        resource_names = []
        if resources is not None:
            resource_names = as_name_list(resources, "resources", "Acl.add_role")

        return self._add_role(name, resource_names, allowed)

    def add_roles(
        self,
        names: Names,
        resources: Optional[Names] = None,
        allowed: bool = True,
    ) -> List[Role]:
        """Add several roles sharing the same optional resources.

        Args:
            names: Role names
            resources: Optional resources the roles are allowed or denied
            allowed: True to allow the given resources, False to deny them

        Returns:
            The created roles, in the order of names
        """
        role_names = as_name_list(names, "names", "Acl.add_roles")
        resource_names = []
        if resources is not None:
            resource_names = as_name_list(resources, "resources", "Acl.add_roles")

        return [self._add_role(name, resource_names, allowed) for name in role_names]

    def remove_role(self, name: str) -> bool:
        """Remove a role with all of its resources.

        Returns:
            True if the role existed, False otherwise
        """
        name = as_name(name, "name", "Acl.remove_role")
        if name in self._roles:
            del self._roles[name]
            logger.debug(f"Removed role {name!r}")
            return True
        return False

    def get_resources(self, match: Optional[str] = None) -> List[str]:
        """Return every resource name known across all roles.

        Args:
            match: Optional regular expression; only resource names in which
                it is found are returned, regardless of allow/deny state

        Returns:
            De-duplicated resource names, first-seen order
        """
        pattern = None
        if match is not None:
            pattern = compile_match(match, "Acl.get_resources")

        resources: Dict[str, None] = {}
        for role in self._roles.values():
            for resource in role.get_resources():
                if pattern is None or pattern.search(resource):
                    resources.setdefault(resource, None)
        return list(resources)

    def get_resources_with_roles(self) -> Dict[str, ResourceAccess]:
        """Return every resource with all roles split into allowed and denied.

        A role that never mentioned a resource is listed as denied for it.
        """
        resources: Dict[str, ResourceAccess] = {}
        for resource in self.get_resources():
            access = resources.setdefault(resource, ResourceAccess())
            for role in self._roles.values():
                if role.is_allowed(resource):
                    access.allowed.append(role)
                else:
                    access.denied.append(role)
        return resources

    def is_allowed(self, role: str, resource: str) -> bool:
        """Return True if the role may access the resource.

        Unknown roles and unknown resources are denied.
        """
        role = as_name(role, "role", "Acl.is_allowed")
        if role in self._roles:
            return self._roles[role].is_allowed(resource)
        return False

    def is_denied(self, role: str, resource: str) -> bool:
        """Return True if the role may not access the resource."""
        return not self.is_allowed(role, resource)

    def allow(self, roles: Names, resources: Names) -> "Acl":
        """Allow one or more roles access to one or more resources.

        Roles that do not exist yet are created.
        """
        return self._fill(roles, resources, True, "Acl.allow")

    def deny(self, roles: Names, resources: Names) -> "Acl":
        """Deny one or more roles access to one or more resources.

        Roles that do not exist yet are created.
        """
        return self._fill(roles, resources, False, "Acl.deny")

    def inherit(self, roles: Names, inherits: Names) -> "Acl":
        """Copy the resources of the inherited roles onto the given roles.

        Inherited entries overwrite entries for the same resource on the
        target roles, and later inherited roles overwrite earlier ones.
        Inherited role names that do not exist are skipped.

        Args:
            roles: Target role name(s); missing targets are created
            inherits: Source role name(s)

        Returns:
            self
        """
        targets = as_name_list(roles, "roles", "Acl.inherit")
        sources = as_name_list(inherits, "inherits", "Acl.inherit")

        for source in sources:
            if source not in self._roles:
                logger.debug(f"Skipping inherit from unknown role {source!r}")
                continue

            resources = self._roles[source].get_resources()
            for resource, allowed in resources.items():
                for target in targets:
                    if allowed:
                        self.allow(target, resource)
                    else:
                        self.deny(target, resource)

            logger.debug(f"Roles {targets!r} inherited {len(resources)} resources from {source!r}")

        return self

    def _fill(self, roles: Names, resources: Names, allowed: bool, method: str) -> "Acl":
        names = as_name_list(roles, "roles", method)
        resource_names = as_name_list(resources, "resources", method)

        for name in names:
            role = self._roles.get(name)
            if role is None:
                role = self._roles[name] = Role(name)
                logger.debug(f"Created role {name!r}")
            role.add_resources(resource_names, allowed)

        logger.debug(
            f"{'Allowed' if allowed else 'Denied'} {names!r} on {resource_names!r}"
        )
        return self

    def _add_role(self, name: str, resources: List[str], allowed: bool) -> Role:
        role = Role(name)
        if resources:
            role.add_resources(resources, allowed)

        if name in self._roles:
            logger.debug(f"Replacing existing role {name!r}")
        self._roles[name] = role
        logger.debug(f"Added role {name!r} with {len(resources)} resources")
        return role
