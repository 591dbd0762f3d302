"""
Cache key builders.

Key layout, using the resource name as the namespace:

    <resource>:id:<member>   one member of the resource
    <resource>:all           the resource as a whole
    <resource>:index         set of every key written for the resource

The `:` separator is not escaped. A member id that itself contains `:id:`
can produce a key that reads ambiguously; callers choosing such ids must
accept that.
"""

from typing import Union

MemberId = Union[str, int]


def member_key(resource: str, member_id: MemberId) -> str:
    """
    Build the key for one member of a resource.

    Example:
        >>> member_key("user", 42)
        'user:id:42'
    """
    return f"{resource}:id:{member_id}"


def collection_key(resource: str) -> str:
    """
    Build the key for the whole-collection entry of a resource.

    Example:
        >>> collection_key("user")
        'user:all'
    """
    return f"{resource}:all"


def index_key(resource: str) -> str:
    """Build the key of the resource's index set."""
    return f"{resource}:index"
