"""
Configuration management for rail-datatables.

Settings are resolved in the following order:
1. Global Django settings (RAIL_DATATABLES)
2. Library defaults (LIBRARY_DEFAULTS)
"""

from typing import Any

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS, SETTINGS_NAME


class SettingsProxy:
    """Proxy for accessing rail-datatables settings with caching."""

    def __init__(self):
        self._cache: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Setting key to retrieve (supports dot notation)
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        if key in self._cache:
            return self._cache[key]

        django_value = self._get_django_setting(key)
        if django_value is not None:
            self._cache[key] = django_value
            return django_value

        library_value = self._get_nested_value(LIBRARY_DEFAULTS, key)
        if library_value is not None:
            self._cache[key] = library_value
            return library_value

        self._cache[key] = default
        return default

    def _get_django_setting(self, key: str) -> Any:
        # Library defaults apply when used outside a configured Django project.
        if not settings.configured:
            return None
        return self._get_nested_value(getattr(settings, SETTINGS_NAME, {}), key)

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current

    def clear_cache(self) -> None:
        """Clear the settings cache."""
        self._cache.clear()


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a setting value using a fresh proxy, so settings overridden at runtime
    (for example with ``override_settings``) are always seen.
    """
    return SettingsProxy().get(key, default)
