"""ABIs of the contracts the relay talks to.

The ABIs are bundled as JSON files in the ``abi`` directory of this package,
one file per contract, named after the contract.
"""
import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from vault_relay.constants import CONTRACT_CORPORATE_VAULT, CONTRACT_USDX

ABI_DIR = Path(__file__).parent.joinpath("abi")

ABI = List[Dict]


class ContractManager:
    """Look up the ABIs of the contracts in `abi_dir`."""

    def __init__(self, abi_dir: Path = ABI_DIR):
        self.abi_dir = Path(abi_dir)

    @property
    def contract_names(self) -> List[str]:
        return sorted(path.stem for path in self.abi_dir.glob("*.json"))

    def get_contract_abi(self, contract_name: str) -> ABI:
        """Return the ABI of `contract_name`.

        :raises KeyError: if no ABI file exists for `contract_name`.
        """
        known = self.contract_names
        if contract_name not in known:
            raise KeyError(
                f"Unknown contract: {contract_name}, known contracts: {', '.join(known)}"
            )
        return _load_abi(self.abi_dir.joinpath(f"{contract_name}.json"))


@lru_cache(maxsize=None)
def _load_abi(path: Path) -> ABI:
    with path.open() as f:
        return json.load(f)


CONTRACT_MANAGER = ContractManager()

__all__ = ["ABI", "CONTRACT_CORPORATE_VAULT", "CONTRACT_MANAGER", "CONTRACT_USDX", "ContractManager"]
