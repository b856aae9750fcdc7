"""
vyrest - client for the Vyatta/VyOS configuration and operational REST API.
"""

from vyrest.client import Client
from vyrest.config import ClientConfig
from vyrest.errors import (
    DecodeFailure,
    ErrorKind,
    InvalidArgumentError,
    NotFoundError,
    StatusFailure,
    TransportFailure,
    VyrestError,
)
from vyrest.models import ConfigNode, OpNode, Process, Session
from vyrest.operational import OperationalCommand
from vyrest.processes import ProcessRegistry
from vyrest.sessions import SessionManager
from vyrest.transaction import ConfigTransaction

__all__ = [
    "Client",
    "ClientConfig",
    "ConfigNode",
    "ConfigTransaction",
    "DecodeFailure",
    "ErrorKind",
    "InvalidArgumentError",
    "NotFoundError",
    "OpNode",
    "OperationalCommand",
    "Process",
    "ProcessRegistry",
    "Session",
    "SessionManager",
    "StatusFailure",
    "TransportFailure",
    "VyrestError",
]
