# 📄 File: garden_care/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the garden care core how to connect to its database and
# content generator and how to behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the settings model and factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - All modules requiring configuration

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection configuration
- Content generator credentials
- Cache bounds and schema version
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
