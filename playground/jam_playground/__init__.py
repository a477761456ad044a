"""
jam_playground - interactive CLI and web API for trying out nodes.

    jam-playground list
    jam-playground run conditional --example --mock
    jam-playground serve
"""

from jam_playground.credential_store import CredentialStore
from jam_playground.runner import Playground, UnknownNodeError
from jam_playground.web import PlaygroundServer, PlaygroundServerConfig, create_app

__version__ = "0.1.0"

__all__ = [
    "CredentialStore",
    "Playground",
    "PlaygroundServer",
    "PlaygroundServerConfig",
    "UnknownNodeError",
    "create_app",
]
