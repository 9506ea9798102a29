"""Service layer for the ClipURL application.

Services implement the shorten and redirect flows on top of the repositories.
"""

from clipurl.services.redirector import Redirector
from clipurl.services.resolver import AliasResolver, compose_short_url

__all__ = ["AliasResolver", "Redirector", "compose_short_url"]
