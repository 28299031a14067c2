"""Access control list: roles, resources and inheritance."""

from .acl import Acl
from .base import AclInterface, ResourceAccess
from .exceptions import AclError, InvalidArgumentError
from .loader import build_acl, load_acl
from .role import Role

__all__ = [
    "Acl",
    "AclError",
    "AclInterface",
    "InvalidArgumentError",
    "ResourceAccess",
    "Role",
    "build_acl",
    "load_acl",
]
