"""Infrastructure modules for Aura.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings, PacmanSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Localization of user-facing messages
"""
