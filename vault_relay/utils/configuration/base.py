from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from vault_relay.exceptions.config import ConfigurationError


class ConfigMapping(Mapping):
    """Read-only mapping of settings, with typed access and validation."""

    CONFIGURATION_ERROR = ConfigurationError

    def __init__(self, loaded: Mapping):
        self.dict = dict(loaded or {})

    def __getitem__(self, item):
        return self.dict[item]

    def __iter__(self):
        return iter(self.dict)

    def __len__(self):
        return len(self.dict)

    def __eq__(self, other):
        if isinstance(other, dict):
            return self.dict == other
        elif isinstance(other, ConfigMapping):
            return self.dict == other.dict
        raise TypeError(f"Incomparable types! {self.__class__.__qualname__} and {type(other)}")

    def __repr__(self):
        return f"{self.__class__.__qualname__}({self.dict})"

    def get_converted(self, key: str, convert: Callable[[Any], Any], default: Any = None) -> Any:
        """Return the value of `key` passed through `convert`, or `default` if it is not set.

        :raises ConfigurationError: if `convert` rejects the value.
        """
        value = self.dict.get(key, default)
        try:
            return convert(value)
        except (TypeError, ValueError) as e:
            raise self.CONFIGURATION_ERROR(
                f"{key} must be of type {convert.__name__}, not {value!r}"
            ) from e

    @classmethod
    def assert_option(cls, expression, err: Optional[Union[str, Exception]] = None):
        """Wrap `assert` to raise a ConfigurationError instead of an AssertionError."""
        try:
            assert expression
        except AssertionError as e:
            if err is None or isinstance(err, str):
                raise cls.CONFIGURATION_ERROR(err) from e
            raise err from e

    def validate(self):
        """Validate the configuration.

        Assert that all required keys are present and hold usable values.
        """
