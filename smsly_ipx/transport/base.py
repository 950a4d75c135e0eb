"""
Gateway Transport
=================
Interface of the RPC collaborator that carries ``send`` requests.
"""

from typing import Protocol, runtime_checkable

from ..models import GatewayResponse, SendRequest


@runtime_checkable
class Transport(Protocol):
    """
    Carries one ``send`` request to the gateway.

    Implementations raise ``TransportFault`` (or a subclass) on SOAP
    faults, timeouts and connection errors.
    """

    def send(self, request: SendRequest) -> GatewayResponse:
        ...

    def close(self) -> None:
        ...
