"""Version information for kong_admin_client."""

__version__ = "0.1.0"
