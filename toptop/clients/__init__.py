"""Clients for talking to the TopTop procedures over HTTP."""
from .rpc_client import RPC_PREFIX, RpcClient, RpcError

__all__ = ["RPC_PREFIX", "RpcClient", "RpcError"]
