"""Tests for configuration validation and models."""

from __future__ import annotations

from pathlib import Path

import pytest

from endeavour import ConfigurationError, MissingFieldError, UploadConfig


class TestValidate:
    """Tests for UploadConfig.validate."""

    def test_complete_config_is_valid(self, make_config) -> None:
        """Test that a fully populated config passes."""
        make_config().validate()

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("url", "", "a URL must be set"),
            ("username", "", "nexus username must be set"),
            ("password", "", "nexus password must be set"),
            ("files", (), "files to upload must be provided"),
            ("repo", "", "a repo must be set"),
            ("path", "", "a path must be set"),
        ],
    )
    def test_missing_field_is_named(self, make_config, field, value, message) -> None:
        """Test that each missing field is reported by name."""
        config = make_config(**{field: value})

        with pytest.raises(MissingFieldError, match=message) as exc_info:
            config.validate()

        assert exc_info.value.field == field
        assert isinstance(exc_info.value, ConfigurationError)

    def test_fields_checked_in_order(self, make_config) -> None:
        """Test that the URL is reported before later missing fields."""
        config = make_config(url="", password="", repo="")

        with pytest.raises(MissingFieldError) as exc_info:
            config.validate()

        assert exc_info.value.field == "url"

    def test_password_reported_before_files(self, make_config) -> None:
        """Test that credentials are checked before the file list."""
        config = make_config(password="", files=())

        with pytest.raises(MissingFieldError) as exc_info:
            config.validate()

        assert exc_info.value.field == "password"

    def test_only_empty_paths_counts_as_missing(self, make_config) -> None:
        """Test that a list of empty path strings is treated as no files."""
        config = make_config(files=("",))

        with pytest.raises(MissingFieldError) as exc_info:
            config.validate()

        assert exc_info.value.field == "files"


class TestUploadConfig:
    """Tests for UploadConfig construction."""

    def test_files_stored_as_tuple(self, make_config) -> None:
        """Test that a list of files is frozen into a tuple."""
        config = make_config(files=["a", Path("b")])

        assert config.files == ("a", Path("b"))

    def test_repr_hides_password(self, make_config) -> None:
        """Test that the password never shows up in repr."""
        config = make_config(password="hunter2")

        assert "hunter2" not in repr(config)

    def test_config_is_immutable(self, make_config) -> None:
        """Test that a config cannot be changed after creation."""
        config = make_config()

        with pytest.raises(AttributeError):
            config.url = "http://other"  # type: ignore[misc]
