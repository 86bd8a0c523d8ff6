"""HTTP request handler for Jira API."""

import http.client
import json
import socket
import ssl
import sys
import time
import urllib.error
import urllib.request
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import click

from ..config import defaults
from ..utils import log
from .exceptions import (
    ParseError,
    RequestTimeoutError,
    TransportError,
    remote_status_error,
)


READ_CHUNK_SIZE = 8192


class JiraRequestHandler:
    """Handles HTTP requests to Jira API."""

    def __init__(
        self,
        base_url: str,
        headers: Dict[str, str],
        timeout: float = defaults.REQUEST_TIMEOUT,
        verbose: bool = False,
        insecure: bool = False,
        quiet: bool = False,
    ):
        self.base_url = base_url
        self.headers = headers
        self.timeout = timeout
        self.verbose = verbose
        self.insecure = insecure
        self.quiet = quiet
        self.ssl_context: Optional[ssl.SSLContext] = None

        if self.insecure:
            self._setup_insecure_ssl()

    def _setup_insecure_ssl(self):
        """Setup SSL context that doesn't verify certificates."""
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        self.ssl_context = context

        if self.verbose:
            log("WARNING: SSL certificate verification disabled", "WARNING")

    def _get_curl_command(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Generate an equivalent curl command for debugging purposes."""
        curl_parts = [f"curl -X {method}", f"--max-time {self.timeout:g}"]

        if self.insecure:
            curl_parts.append("-k")

        for key, value in headers.items():
            if key == "Authorization":
                value = "Basic ${JIRA_BASIC_AUTH}"
            curl_parts.append(f'-H "{key}: {value}"')

        final_url = url
        if params:
            final_url = f"{url}?{urlencode(params)}"

        curl_parts.append(f"'{final_url}'")
        return " ".join(curl_parts)

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        label: Optional[str] = None,
    ) -> Any:
        """Make HTTP request to Jira API and return the decoded JSON body.

        Raises:
            RequestTimeoutError: no answer within ``self.timeout`` seconds
            TransportError: connection level failure
            RemoteStatusError: the server answered with a non-success status
            ParseError: the body is not valid JSON
        """
        url = f"{self.base_url}/{endpoint}"

        if self.verbose:
            log(f"API call Requested: {method} {url}")
            if params:
                log(f"Parameters: {params}")
            curl_cmd = self._get_curl_command(method, url, self.headers, params)
            log(f"curl command :\n{curl_cmd}")

        full_url = f"{url}?{urlencode(params)}" if params else url
        request = urllib.request.Request(full_url, method=method)
        for key, value in self.headers.items():
            request.add_header(key, value)

        try:
            deadline = time.monotonic() + self.timeout
            return self._send_request(request, endpoint, label, deadline)
        except urllib.error.HTTPError as e:
            body = e.read().decode("utf-8", errors="replace")
            if self.verbose:
                log(f"HTTP error occurred: {e}", "ERROR")
                log(f"Response: {body}", "ERROR")
            raise remote_status_error(endpoint, e.code, body) from e
        except urllib.error.URLError as e:
            if isinstance(e.reason, (socket.timeout, TimeoutError)):
                raise RequestTimeoutError(endpoint, self.timeout) from e
            if self.verbose:
                log(f"URL error occurred: {e}", "ERROR")
            raise TransportError(f"Error making request to Jira: {e.reason}") from e
        except (socket.timeout, TimeoutError) as e:
            raise RequestTimeoutError(endpoint, self.timeout) from e
        except (http.client.HTTPException, OSError) as e:
            raise TransportError(f"Error making request to Jira: {e}") from e

    def _send_request(
        self,
        request: urllib.request.Request,
        endpoint: str,
        label: Optional[str],
        deadline: float,
    ) -> Any:
        """Send the actual HTTP request."""
        if not self.verbose and not self.quiet and label:
            with click.progressbar(
                length=1,
                file=sys.stderr,
                label=label,
                show_eta=False,
                show_percent=False,
                fill_char="⣾⣷⣯⣟⡿⢿⣻⣽"[0],
                empty_char=" ",
            ) as bar:
                response_data = self._execute_request(request, endpoint, deadline)
                bar.update(1)
        else:
            response_data = self._execute_request(request, endpoint, deadline)

        return response_data

    def _execute_request(
        self, request: urllib.request.Request, endpoint: str, deadline: float
    ) -> Any:
        """Execute the HTTP request and parse response."""
        with urllib.request.urlopen(
            request, timeout=self.timeout, context=self.ssl_context
        ) as response:
            status_code = response.status
            raw = self._read_body(response, endpoint, deadline)

        if self.verbose:
            log(f"Response status: {status_code}")

        if not 200 <= status_code < 300:
            raise remote_status_error(
                endpoint, status_code, raw.decode("utf-8", errors="replace")
            )

        try:
            response_text = raw.decode("utf-8")
            return json.loads(response_text) if response_text else {}
        except ValueError as e:
            raise ParseError(f"Error unmarshalling JSON from {endpoint}: {e}") from e

    def _read_body(self, response, endpoint: str, deadline: float) -> bytes:
        """Read the body in chunks, giving up once the request deadline passes.

        The socket timeout only bounds a single read, not the whole body.
        """
        chunks = []
        while True:
            if time.monotonic() > deadline:
                raise RequestTimeoutError(endpoint, self.timeout)
            chunk = response.read1(READ_CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
