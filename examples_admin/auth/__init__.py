"""
Operator authentication for the Examples Admin Console.
Credentials are checked by the examples backend, never locally.
"""

from examples_admin.auth.credentials import Credentials, CredentialStore
from examples_admin.auth.gate import AuthGate
from examples_admin.auth.session import ConsoleSession, SessionStore

__all__ = [
    "Credentials",
    "CredentialStore",
    "AuthGate",
    "ConsoleSession",
    "SessionStore",
]
