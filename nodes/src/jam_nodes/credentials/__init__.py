"""
Credential specs for every service used by the built-in nodes.

Usage:
    from jam_core.credentials import CredentialManager
    from jam_nodes.credentials import CREDENTIAL_SPECS

    creds = CredentialManager(CREDENTIAL_SPECS)
    creds.validate_for_node_types(["search_contacts"])

To add a service:
1. Add a CredentialSpec to the matching category file (or a new one)
2. Merge it into CREDENTIAL_SPECS below
3. Add its factory to jam_nodes.services.SERVICE_FACTORIES
"""

from jam_core.credentials import CredentialManager, CredentialSpec

from .ai import AI_CREDENTIALS
from .data import DATA_CREDENTIALS
from .social import SOCIAL_CREDENTIALS

CREDENTIAL_SPECS: dict[str, CredentialSpec] = {
    **DATA_CREDENTIALS,
    **AI_CREDENTIALS,
    **SOCIAL_CREDENTIALS,
}


def create_credential_manager(**kwargs) -> CredentialManager:
    """CredentialManager over CREDENTIAL_SPECS (kwargs as for CredentialManager)."""
    return CredentialManager(CREDENTIAL_SPECS, **kwargs)


__all__ = [
    "AI_CREDENTIALS",
    "CREDENTIAL_SPECS",
    "DATA_CREDENTIALS",
    "SOCIAL_CREDENTIALS",
    "create_credential_manager",
]
