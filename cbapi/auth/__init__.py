"""ABOUTME: Credential configuration, credential-mode resolution and request signing"""

from .models import AccessLevel, Credentials
from .resolver import CredentialResolver
from .signer import RequestSigner, SignedRequest, canonical_message, hmac_signature, implode_params

__all__ = [
    "AccessLevel",
    "Credentials",
    "CredentialResolver",
    "RequestSigner",
    "SignedRequest",
    "canonical_message",
    "hmac_signature",
    "implode_params",
]
