"""
Re-export core connector classes for easier imports.

Usage:
    from common.docpub_common import GoogleDocsClient, GoogleCredentials
"""

from .connectors.google_base import GoogleCredentials
from .connectors.google_docs_client import GoogleDocsClient
from .connectors.google_drive_client import GoogleDriveClient
from .connectors.google_identity_client import GoogleIdentityClient

__all__ = [
    "GoogleCredentials",
    "GoogleDocsClient",
    "GoogleDriveClient",
    "GoogleIdentityClient",
]
