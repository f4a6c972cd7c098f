"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base error for startup and wiring failures."""

    pass


class ConfigurationError(UtilError):
    """A setting is missing or unsafe for the current environment."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"Invalid configuration for {setting}: {reason}")


class DependencyInjectionError(UtilError):
    """No provider matches the requested component, or unmocking is invalid."""

    pass
