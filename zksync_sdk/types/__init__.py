"""Typed structures for zkSync JSON-RPC requests and results."""
from .block_number import BlockNumber
from .transaction import Eip712Meta, FilterQuery, PaymasterParams, Transaction
from .rpc_results import (
    Block,
    BlockDetails,
    BridgeContracts,
    Fee,
    Header,
    L2ToL1Log,
    L2ToL1MessageProof,
    Log,
    Token,
    TransactionReceipt,
    TransactionResponse,
)

__all__ = [
    "BlockNumber",
    "Eip712Meta",
    "FilterQuery",
    "PaymasterParams",
    "Transaction",
    "Block",
    "BlockDetails",
    "BridgeContracts",
    "Fee",
    "Header",
    "L2ToL1Log",
    "L2ToL1MessageProof",
    "Log",
    "Token",
    "TransactionReceipt",
    "TransactionResponse",
]
