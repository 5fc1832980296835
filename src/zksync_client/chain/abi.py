"""ABI fragments of the rollup's base-chain contracts used by the client."""

from __future__ import annotations

from typing import Any

SYNC_GOV_CONTRACT_ABI: list[dict[str, Any]] = [
    {
        "constant": True,
        "inputs": [{"name": "", "type": "address"}],
        "name": "tokenIds",
        "outputs": [{"name": "", "type": "uint16"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [{"name": "", "type": "uint16"}],
        "name": "tokenAddresses",
        "outputs": [{"name": "", "type": "address"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "totalTokens",
        "outputs": [{"name": "", "type": "uint16"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
]

SYNC_MAIN_CONTRACT_ABI: list[dict[str, Any]] = [
    {
        "constant": True,
        "inputs": [],
        "name": "totalOpenPriorityRequests",
        "outputs": [{"name": "", "type": "uint64"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "firstPriorityRequestId",
        "outputs": [{"name": "", "type": "uint64"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
]
