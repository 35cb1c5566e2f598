"""Kong resource managers.

Managers use the Repository pattern: each one maps its methods onto fixed
Admin API verbs and paths, delegating the HTTP work to KongAdminClient.
"""

from kong_admin_client.services.base import BaseEntityManager
from kong_admin_client.services.certificate_manager import CertificateManager
from kong_admin_client.services.plugin_manager import PluginManager

__all__ = [
    "BaseEntityManager",
    "CertificateManager",
    "PluginManager",
]
