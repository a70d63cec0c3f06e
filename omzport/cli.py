#!/usr/bin/env python3

import logging

import click

from omzport.config import PortConfig, load_config, configure_logging, logger
from omzport.cli_utils import standard_command, add_common_options
from omzport.core import update_port
from omzport.infra import GitHubClient, MakeClient
from omzport.render import render_versions


@click.command()
@click.version_option(package_name="omzport")
@click.option('--omz-port', 'omz_port', required=True,
              type=click.Path(file_okay=False, path_type=str),
              help='Path to the ohmyzsh port directory')
@click.option('--force', is_flag=True, default=False,
              help='Force port update even if no new version is available')
@add_common_options('verbose', 'dry_run')
@standard_command
def cli(omz_port, force, verbose, dry_run):
    """omzport - Update the FreeBSD ohmyzsh port to the latest upstream commit.

    Compares the newest commit on ohmyzsh/ohmyzsh master with PORTVERSION
    in the port Makefile. When upstream is newer (or --force is given) the
    Makefile is rewritten, distinfo and pkg-plist are regenerated and the
    port is built and packaged as a test.
    """
    if verbose:
        logger.setLevel(logging.DEBUG)
    settings = load_config()
    configure_logging(settings, verbose=verbose)

    config = PortConfig.from_port_dir(omz_port, force=force, dry_run=dry_run)
    github = GitHubClient(api_url=settings["github"]["api_url"])
    make = MakeClient(config.port_path, make_command=settings["build"]["make_command"])

    update_port(config, github, make, on_versions=render_versions)


def main():
    cli()

if __name__ == "__main__":
    main()
