class ConfigurationError(ValueError):
    """Generic error thrown if the relay's configuration is invalid or incomplete."""


class MissingSettingError(ConfigurationError):
    """One or more required settings were not supplied by the environment."""

    def __init__(self, *names):
        self.names = names
        super(MissingSettingError, self).__init__(
            f"Missing required setting(s): {', '.join(names)}"
        )
