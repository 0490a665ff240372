"""Endeavour - upload files and directories to a Nexus repository.

Example usage:
    from endeavour import NexusUploader, UploadConfig

    config = UploadConfig(
        url="https://nexus.example.com/repository",
        repo="raw-releases",
        path="myapp/1.2.0",
        username="deployer",
        password="secret",
        files=("dist", "CHANGELOG.md"),
    )
    with NexusUploader(config) as uploader:
        uploader.upload()
"""

from endeavour.client import NexusUploader, destination_url, walk_files
from endeavour.exceptions import (
    ConfigurationError,
    EndeavourError,
    FilesystemError,
    MissingFieldError,
    TransferError,
    UploadError,
)
from endeavour.models import FileUploadTarget, TransferOutcome, UploadConfig

__version__ = "0.1.0"

__all__ = [
    # Main uploader
    "NexusUploader",
    "destination_url",
    "walk_files",
    # Models
    "UploadConfig",
    "FileUploadTarget",
    "TransferOutcome",
    # Exceptions
    "EndeavourError",
    "ConfigurationError",
    "MissingFieldError",
    "FilesystemError",
    "TransferError",
    "UploadError",
]
