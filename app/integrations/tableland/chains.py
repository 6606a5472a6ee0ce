"""Chains Tableland tables can live on.

A table's chain decides which gateway serves it: mainnets share one host,
testnets another, and the local development chain (Hardhat, 31337) is served
by a gateway on localhost.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

MAINNET = "mainnet"
TESTNET = "testnet"
LOCAL = "local"


class UnsupportedChainError(ValueError):
    """The chain id is not one Tableland is deployed on."""


@dataclass(frozen=True)
class Chain:
    """A chain Tableland is deployed on.

    Attributes:
        name: Short chain name (e.g. "mainnet", "maticmum")
        chain_id: EVM chain id
        phrase: Human readable name shown to users
        network: One of "mainnet", "testnet", "local"
    """

    name: str
    chain_id: int
    phrase: str
    network: str = MAINNET


_CHAINS = (
    Chain("mainnet", 1, "Ethereum Mainnet"),
    Chain("optimism", 10, "Optimism Mainnet"),
    Chain("matic", 137, "Polygon Mainnet"),
    Chain("arbitrum", 42161, "Arbitrum One"),
    Chain("arbitrum-nova", 42170, "Arbitrum Nova"),
    Chain("filecoin", 314, "Filecoin Mainnet"),
    Chain("sepolia", 11155111, "Ethereum Sepolia", TESTNET),
    Chain("arbitrum-sepolia", 421614, "Arbitrum Sepolia", TESTNET),
    Chain("optimism-sepolia", 11155420, "Optimism Sepolia", TESTNET),
    Chain("base-sepolia", 84532, "Base Sepolia", TESTNET),
    Chain("filecoin-calibration", 314159, "Filecoin Calibration", TESTNET),
    Chain("polygon-amoy", 80002, "Polygon Amoy", TESTNET),
    Chain("goerli", 5, "Ethereum Goerli", TESTNET),
    Chain("optimism-goerli", 420, "Optimism Goerli", TESTNET),
    Chain("arbitrum-goerli", 421613, "Arbitrum Goerli", TESTNET),
    Chain("maticmum", 80001, "Polygon Mumbai", TESTNET),
    Chain("local-tableland", 31337, "Local Tableland", LOCAL),
)

SUPPORTED_CHAINS: Dict[int, Chain] = {chain.chain_id: chain for chain in _CHAINS}


def find_chain(chain_id: Union[int, str]) -> Optional[Chain]:
    """Chain for ``chain_id``, or None when it is unknown or not numeric."""
    try:
        return SUPPORTED_CHAINS.get(int(chain_id))
    except (TypeError, ValueError):
        return None


def get_chain(chain_id: Union[int, str]) -> Chain:
    """Chain for ``chain_id``.

    Raises:
        UnsupportedChainError: If Tableland is not deployed on the chain
    """
    chain = find_chain(chain_id)
    if chain is None:
        raise UnsupportedChainError("Invalid chain provided")
    return chain
