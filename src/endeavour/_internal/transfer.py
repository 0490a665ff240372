"""Streaming HTTP PUT of single files to a Nexus repository."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from endeavour.exceptions import FilesystemError, TransferError
from endeavour.models import TransferOutcome

logger = logging.getLogger(__name__)

# Nexus answers a successful raw upload with 201 Created
EXPECTED_STATUS = 201


def check_outcome(outcome: TransferOutcome) -> None:
    """Raise TransferError unless the server answered 201 Created."""
    if outcome.status_code == EXPECTED_STATUS:
        return
    if outcome.body:
        message = (
            f"response was {outcome.status_code}, expected {EXPECTED_STATUS}; "
            f"response body: {outcome.body}"
        )
    else:
        message = (
            f"response was {outcome.status_code}, expected {EXPECTED_STATUS}; "
            "there was no response body"
        )
    raise TransferError(
        message,
        status_code=outcome.status_code,
        expected=EXPECTED_STATUS,
        body=outcome.body or None,
    )


class TransferExecutor:
    """Uploads one file per call with basic auth over a shared httpx client."""

    def __init__(
        self,
        client: httpx.Client,
        username: str,
        password: str,
        *,
        verbose: bool = False,
    ) -> None:
        self._client = client
        self._auth = httpx.BasicAuth(username, password)
        self._verbose = verbose

    def upload(self, local_path: str | Path, url: str) -> TransferOutcome:
        """PUT the file at local_path to url.

        The file is streamed from disk, never read into memory whole.

        Returns:
            TransferOutcome of the accepted upload

        Raises:
            FilesystemError: If the file cannot be opened
            TransferError: If the request fails or the status is not 201
        """
        local_path = Path(local_path)
        try:
            f = local_path.open("rb")
        except OSError as e:
            raise FilesystemError(f"could not open file {local_path}: {e}", local_path) from e

        with f:
            try:
                with self._client.stream("PUT", url, content=f, auth=self._auth) as response:
                    outcome = self._read_outcome(response)
            except httpx.HTTPError as e:
                raise TransferError(f"could not upload {local_path.name}: {e}") from e

        check_outcome(outcome)
        if self._verbose:
            logger.info(f"got HTTP {outcome.status_code} for {local_path.name} - written to server")
        return outcome

    @staticmethod
    def _read_outcome(response: httpx.Response) -> TransferOutcome:
        """Collect the status, and the body only when it will be reported."""
        if response.status_code == EXPECTED_STATUS:
            return TransferOutcome(status_code=response.status_code)
        try:
            response.read()
        except httpx.HTTPError as e:
            raise TransferError(
                f"response was {response.status_code}, expected {EXPECTED_STATUS}; "
                f"could not read response body: {e}",
                status_code=response.status_code,
                expected=EXPECTED_STATUS,
            ) from e
        return TransferOutcome(status_code=response.status_code, body=response.text)
