"""
Tenant namespacing.

Every client name maps to a storage namespace: lowercase, with each run of
whitespace collapsed into one hyphen. Names that normalize the same share
their data.
"""

import re

_WHITESPACE = re.compile(r"\s+")

TENANT_NAME_KEY = "tenantName"


def namespace_key(tenant_name: str | None) -> str:
    """Return the storage namespace for a client name"""
    if tenant_name is None:
        return ""
    return _WHITESPACE.sub("-", str(tenant_name).lower())
