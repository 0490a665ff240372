"""Command-line interface for endeavour."""

from __future__ import annotations

import logging
import os
import sys
import time

import click
from dotenv import load_dotenv

from endeavour import EndeavourError, NexusUploader, UploadConfig, __version__

DEFAULT_USER_ENV = "REPO_USERNAME"
DEFAULT_PASS_ENV = "REPO_PASSWORD"

ART = r"""
                .                                            .
     *   .                  .              .        .   *          .
  .         .                     .       .           .      .        .
        o                             .                   .
         .              .                  .           .
          0     .
                 .          .                 ,                ,    ,
 .          \          .                         .
      .      \   ,
   .          o     .                 .                   .            .
     .         \                 ,             .                .
               #\##\#      .                              .        .
             #  #O##\###                .                        .
   .        #*#  #\##\###                       .                     ,
        .   ##*#  #\##\##               .                     .
      .      ##*#  #o##\#         .                             ,       .
          .     *#  #\#     .                    .             .          ,
                      \          .                         .
____^/\___^--____/\____O______________/\/\---/\___________---______________
   /\^   ^  ^    ^                  ^^ ^  '\ ^          ^       ---
         --           -            --  -      -         ---  __       ^
   --  __                      ___--  ^  ^                         --  __
"""


def _read_credential(env_var: str) -> str:
    """Read a credential from the environment, exiting if it is unset."""
    value = os.environ.get(env_var)
    if value is None:
        click.echo(
            click.style(f"The variable {env_var} must be set and must be non-empty", fg="red"),
            err=True,
        )
        sys.exit(1)
    return value


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, package_name="endeavour")
@click.argument("files", nargs=-1, type=click.Path())
@click.option(
    "--user-var",
    default=DEFAULT_USER_ENV,
    show_default=True,
    help="Environment variable for Nexus username",
)
@click.option(
    "--pass-var",
    default=DEFAULT_PASS_ENV,
    show_default=True,
    help="Environment variable for Nexus password",
)
@click.option("--url", "-U", envvar="ENDEAVOUR_URL", default="", help="Nexus URL to upload to")
@click.option("--repo", "-r", default="", help="Nexus repository to upload to")
@click.option("--path", "-P", "dest_path", default="", help="Path to publish to inside repository")
@click.option("--no-art", is_flag=True, help="If set, art will not be displayed on a success")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="If set, extra log messages will be displayed that do not contain secrets",
)
def main(
    files: tuple[str, ...],
    user_var: str,
    pass_var: str,
    url: str,
    repo: str,
    dest_path: str,
    no_art: bool,
    verbose: bool,
) -> None:
    """Upload files or directories to Nexus, for use in CI/CD.

    FILES: One or more files or directories to upload.

    Credentials are read from the REPO_USERNAME and REPO_PASSWORD environment
    variables unless --user-var / --pass-var name others.

    Examples:

        endeavour -U https://nexus.example.com/repository -r raw -P app/1.0 dist/

        endeavour -U https://nexus.example.com/repository -r raw -P app/1.0 app.tar.gz
    """
    load_dotenv()
    _setup_logging(verbose)

    config = UploadConfig(
        url=url,
        repo=repo,
        path=dest_path,
        username=_read_credential(user_var),
        password=_read_credential(pass_var),
        verbose=verbose,
        files=files,
    )

    start = time.monotonic()
    try:
        with NexusUploader(config) as uploader:
            uploader.upload()
    except EndeavourError as e:
        click.echo(click.style(f"Upload failed. Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"All done! Completed in {time.monotonic() - start:.2f}s")
    if not no_art:
        click.echo(ART)


if __name__ == "__main__":
    main()
