import os
from typing import Mapping, Optional

import structlog
from dotenv import find_dotenv, load_dotenv

from vault_relay.constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_HOST,
    ENV_PORT,
    ENV_PRIVATE_KEY,
    ENV_RECEIPT_TIMEOUT,
    ENV_RPC_URL,
    ENV_USDX_ADDRESS,
    ENV_VAULT_ADDRESS,
    RECEIPT_TIMEOUT,
)
from vault_relay.exceptions.config import MissingSettingError
from vault_relay.utils.configuration.base import ConfigMapping

log = structlog.get_logger(__name__)

#: Settings without a default value.
REQUIRED_SETTINGS = (ENV_RPC_URL, ENV_PRIVATE_KEY, ENV_VAULT_ADDRESS, ENV_USDX_ADDRESS)

#: All settings read from the environment.
KNOWN_SETTINGS = REQUIRED_SETTINGS + (ENV_HOST, ENV_PORT, ENV_RECEIPT_TIMEOUT)


class RelayConfig(ConfigMapping):
    """Relay settings interface and validator.

    Wraps a mapping of environment variables, and handles defaults as well as
    conversion of the values to their native types.

    Example ``.env`` file::

        ARBITRUM_RPC=https://sepolia-rollup.arbitrum.io/rpc
        PRIVATE_KEY=0x4c0883a69102937d6231471b5dbb6204fe512961708279f6d5f7b8e0d8d7b1a2
        VAULT_ADDRESS=0x1000000000000000000000000000000000000001
        USDX_ADDRESS=0x2000000000000000000000000000000000000002
        PORT=4000

    The configuration is validated on instantiation.
    """

    def __init__(self, loaded: Mapping):
        super(RelayConfig, self).__init__(
            {key: value for key, value in (loaded or {}).items() if value not in (None, "")}
        )
        self.validate()

    def __repr__(self):
        masked = dict(self.dict)
        if ENV_PRIVATE_KEY in masked:
            masked[ENV_PRIVATE_KEY] = "***"
        return f"{self.__class__.__qualname__}({masked})"

    __str__ = __repr__

    def validate(self):
        """Validate the settings given.

        :raises MissingSettingError: if any of :var:`REQUIRED_SETTINGS` is absent.
        :raises ConfigurationError: if the port or receipt timeout are out of range, or not numeric.
        """
        missing = [name for name in REQUIRED_SETTINGS if name not in self.dict]
        if missing:
            raise MissingSettingError(*missing)

        self.assert_option(
            0 < self.port < 65536, f"{ENV_PORT} must be between 1 and 65535, not {self.port}"
        )
        self.assert_option(
            self.receipt_timeout > 0,
            f"{ENV_RECEIPT_TIMEOUT} must be a positive number, not {self.receipt_timeout}",
        )

    @property
    def rpc_url(self) -> str:
        """URL of the JSON-RPC endpoint of the ledger."""
        return self.dict[ENV_RPC_URL]

    @property
    def private_key(self) -> str:
        return self.dict[ENV_PRIVATE_KEY]

    @property
    def vault_address(self) -> str:
        return self.dict[ENV_VAULT_ADDRESS]

    @property
    def usdx_address(self) -> str:
        return self.dict[ENV_USDX_ADDRESS]

    @property
    def host(self) -> str:
        return self.dict.get(ENV_HOST, DEFAULT_HOST)

    @property
    def port(self) -> int:
        """The port to listen on. Defaults to 4000."""
        return self.get_converted(ENV_PORT, int, DEFAULT_PORT)

    @property
    def receipt_timeout(self) -> float:
        """Seconds to wait for a transaction to be confirmed. Defaults to 120."""
        return self.get_converted(ENV_RECEIPT_TIMEOUT, float, RECEIPT_TIMEOUT)


def load_relay_config(
    env_file: Optional[str] = None, overrides: Optional[Mapping] = None
) -> RelayConfig:
    """Load the relay's configuration from the environment.

    Variables found in `env_file` (or a ``.env`` file in the working directory,
    if no path is given) are added to the environment, without replacing
    variables which are already set. `overrides` take precedence over both.
    """
    dotenv_path = env_file or find_dotenv(usecwd=True)
    loaded_file = load_dotenv(dotenv_path=dotenv_path, override=False)
    log.debug("Loaded .env file", path=dotenv_path, found=loaded_file)

    settings = {name: os.environ.get(name) for name in KNOWN_SETTINGS}
    settings.update({key: value for key, value in (overrides or {}).items() if value is not None})
    return RelayConfig(settings)
