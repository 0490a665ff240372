"""Main NexusUploader class for publishing files to a Nexus repository."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import httpx

from endeavour._internal.transfer import TransferExecutor
from endeavour.exceptions import EndeavourError, FilesystemError, UploadError
from endeavour.models import FileUploadTarget, UploadConfig

logger = logging.getLogger(__name__)


def destination_url(config: UploadConfig, target: FileUploadTarget) -> str:
    """Build the URL a file is PUT to.

    The layout is fixed: {url}/{repo}/{path}/{remote_path}. Separators in the
    remote path are turned into forward slashes; nothing is URL-escaped.
    """
    remote_path = target.remote_path.replace("\\", "/")
    if os.sep != "/":
        remote_path = remote_path.replace(os.sep, "/")
    return f"{config.url}/{config.repo}/{config.path}/{remote_path}"


def walk_files(root: str | Path, *, verbose: bool = False) -> Iterator[FileUploadTarget]:
    """Yield an upload target for every non-directory entry under root.

    Depth-first, entries sorted by name inside each directory. Symlinks are
    not followed. The first listing error raises FilesystemError and ends the
    walk.

    Raises:
        FilesystemError: If root is empty or a directory cannot be listed
    """
    if not os.fspath(root):
        raise FilesystemError("current root path cannot be empty")
    root = Path(root)
    if verbose:
        logger.info(f"{root.name or root} was a directory, stepping in")
    yield from _walk(root, root, verbose)


def _walk(root: Path, directory: Path, verbose: bool) -> Iterator[FileUploadTarget]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise FilesystemError(f"could not access file/dir {directory}: {e}", directory) from e

    for entry in entries:
        entry_path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            raise FilesystemError(f"could not access file/dir {entry_path}: {e}", entry_path) from e

        if is_dir:
            if verbose:
                logger.info(f"{entry.name} was a directory, stepping in")
            yield from _walk(root, entry_path, verbose)
        else:
            yield FileUploadTarget(
                local_path=entry_path,
                remote_path=entry_path.relative_to(root).as_posix(),
                from_directory_walk=True,
            )


class NexusUploader:
    """Uploads files and directory trees to a Nexus repository.

    Supports both context manager and manual session patterns.

    Example (context manager - recommended):
        config = UploadConfig(
            url="https://nexus.example.com/repository",
            repo="raw-releases",
            path="myapp/1.2.0",
            username="deployer",
            password="secret",
            files=("dist",),
        )
        with NexusUploader(config) as uploader:
            uploader.upload()

    A caller-supplied httpx.Client (timeouts, proxies, transports) is used as
    is and left open on close().
    """

    def __init__(
        self,
        config: UploadConfig,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the uploader.

        Args:
            config: What to upload and where
            http_client: Optional client to send requests with
        """
        self._config = config
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=None)
        self._transfer = TransferExecutor(
            self._http,
            config.username,
            config.password,
            verbose=config.verbose,
        )

    def __enter__(self) -> NexusUploader:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit context manager."""
        self.close()

    @property
    def config(self) -> UploadConfig:
        return self._config

    def upload(self) -> list[FileUploadTarget]:
        """Upload every configured file and directory, in order.

        Stops at the first failure; nothing after it is attempted.

        Returns:
            The targets that were uploaded

        Raises:
            ConfigurationError: If a required setting is missing
            FilesystemError: If an input path cannot be stat-ed
            UploadError: If a file or directory upload fails
        """
        self._config.validate()

        uploaded: list[FileUploadTarget] = []
        for file_path in self._config.files:
            if not os.fspath(file_path):
                raise FilesystemError("could not stat an empty path", file_path)
            try:
                info = os.stat(file_path)
            except OSError as e:
                raise FilesystemError(f"could not stat {file_path}: {e}", file_path) from e

            if stat.S_ISDIR(info.st_mode):
                try:
                    uploaded.extend(self.upload_directory(file_path))
                except EndeavourError as e:
                    raise UploadError(
                        f"failed to upload files in {file_path}: {e}", file_path
                    ) from e
            else:
                target = FileUploadTarget(
                    local_path=Path(file_path),
                    remote_path=os.path.basename(file_path),
                )
                try:
                    self.upload_target(target)
                except EndeavourError as e:
                    raise UploadError(
                        f"could not upload single file {file_path}: {e}", file_path
                    ) from e
                uploaded.append(target)

        return uploaded

    def upload_directory(self, root: str | Path) -> list[FileUploadTarget]:
        """Upload every file below root, keeping paths relative to it.

        Raises:
            FilesystemError: If root is empty or cannot be walked
            UploadError: If a file upload fails
        """
        uploaded: list[FileUploadTarget] = []
        for target in walk_files(root, verbose=self._config.verbose):
            try:
                self.upload_target(target)
            except EndeavourError as e:
                raise UploadError(f"could not upload file: {e}", target.local_path) from e
            uploaded.append(target)
        return uploaded

    def upload_target(self, target: FileUploadTarget) -> None:
        """PUT a single resolved target to its destination URL."""
        url = destination_url(self._config, target)
        logger.debug(f"Uploading {target.local_path} to {url}")
        self._transfer.upload(target.local_path, url)

    def close(self) -> None:
        """Close the HTTP client if this uploader created it."""
        if self._owns_client:
            self._http.close()