"""
IPX Transports
==============
Transport interface and the WSDL driven SOAP implementation.
"""

from .base import Transport
from .soap import SoapTransport

__all__ = [
    "Transport",
    "SoapTransport",
]
