"""
SOAP Transport
==============
Calls the IPX SmsApi52 ``send`` operation through a WSDL driven zeep client.
"""

from typing import Any, Dict, Optional

import requests
import structlog
from pydantic import ValidationError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt
from zeep import Client
from zeep.cache import InMemoryCache
from zeep.exceptions import Error as ZeepError
from zeep.exceptions import Fault, TransportError
from zeep.helpers import serialize_object
from zeep.transports import Transport as ZeepTransport

from ..config import IPXConfig
from ..exceptions import ConnectionFailure, SoapFault
from ..models import GatewayResponse, SendRequest

logger = structlog.get_logger(__name__)

SEND_OPERATION = "send"


class SoapTransport:
    """
    SOAP transport for the IPX SmsApi52 ``send`` operation.

    Features:
    - WSDL loaded on first send, optionally cached in memory
    - Connect and total timeouts
    - Reconnect on connection errors, up to ``connect_attempts`` tries
    - SOAP Fault and HTTP error mapping to ``TransportFault``
    """

    def __init__(
        self,
        wsdl_url: str,
        *,
        connect_timeout: int = 30000,
        timeout: int = 30000,
        connect_attempts: int = 1,
        verify_certificate: bool = True,
        cache_wsdl: bool = True,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            wsdl_url: Location of the SmsApi52 WSDL (URL or file path)
            connect_timeout: Connect timeout in milliseconds
            timeout: Total timeout in milliseconds
            connect_attempts: Number of connect attempts
            verify_certificate: Verify the gateway TLS certificate
            cache_wsdl: Keep the fetched WSDL in memory
            session: Preconfigured session, mainly for tests
        """
        self.wsdl_url = wsdl_url
        self.connect_attempts = max(1, connect_attempts)
        self.cache_wsdl = cache_wsdl
        self.timeouts = (connect_timeout / 1000, timeout / 1000)
        self._session = session or requests.Session()
        self._session.verify = verify_certificate
        self._client: Optional[Client] = None

    @classmethod
    def from_config(cls, config: IPXConfig) -> "SoapTransport":
        return cls(
            config.wsdl_url,
            connect_timeout=config.connect_timeout,
            timeout=config.timeout,
            connect_attempts=config.connect_attempts,
            verify_certificate=config.verify_certificate,
            cache_wsdl=config.cache_wsdl,
        )

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()
        self._client = None

    def _log_retry(self, retry_state) -> None:
        logger.warning(
            "IPX connect failed, retrying",
            attempt=retry_state.attempt_number,
            max_attempts=self.connect_attempts,
            error=str(retry_state.outcome.exception()),
        )

    def _retrying(self) -> Retrying:
        return Retrying(
            retry=retry_if_exception_type(requests.exceptions.ConnectionError),
            stop=stop_after_attempt(self.connect_attempts),
            before_sleep=self._log_retry,
            reraise=True,
        )

    def get_client(self) -> Client:
        """
        Return the zeep client, loading the WSDL on first use.

        Raises:
            ConnectionFailure: If the WSDL cannot be fetched or parsed
        """
        if self._client is not None:
            return self._client

        transport = ZeepTransport(
            session=self._session,
            timeout=self.timeouts,
            operation_timeout=self.timeouts,
            cache=InMemoryCache() if self.cache_wsdl else None,
        )
        try:
            self._client = self._retrying()(Client, self.wsdl_url, transport=transport)
        except (ZeepError, requests.exceptions.RequestException, OSError) as e:
            logger.error("IPX WSDL load failed", wsdl=self.wsdl_url, error=str(e))
            raise ConnectionFailure("WSDL", f"Cannot create SOAP client: {e}")

        logger.debug("IPX WSDL loaded", wsdl=self.wsdl_url)
        return self._client

    def _call(self, fields: Dict[str, str]) -> Any:
        operation = getattr(self.get_client().service, SEND_OPERATION)
        try:
            return self._retrying()(operation, **fields)
        except Fault as e:
            raise SoapFault(e.code or "", e.message or "")
        except TransportError as e:
            raise ConnectionFailure(
                "HTTP",
                f"IPX answered with HTTP {e.status_code}",
                status_code=e.status_code,
            )
        except ZeepError as e:
            raise ConnectionFailure("Client", f"Unexpected send response: {e}")
        except requests.exceptions.Timeout as e:
            raise ConnectionFailure("Timeout", f"Request to IPX timed out: {e}")
        except requests.exceptions.RequestException as e:
            raise ConnectionFailure("Connection", f"Failed to connect to IPX: {e}")

    def send(self, request: SendRequest) -> GatewayResponse:
        """
        Call the ``send`` operation.

        Args:
            request: Request for one message part

        Returns:
            Parsed gateway response

        Raises:
            SoapFault: If the gateway answers with a SOAP Fault
            ConnectionFailure: On network errors, timeouts and malformed answers
        """
        result = self._call(request.to_wire())

        fields = serialize_object(result, target_cls=dict) or {}
        try:
            return GatewayResponse.model_validate(
                {key: value for key, value in fields.items() if value is not None}
            )
        except (AttributeError, ValidationError) as e:
            raise ConnectionFailure("Client", f"Unexpected send response: {e}")
