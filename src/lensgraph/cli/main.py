"""
lensgraph CLI - Main entry point.

Developer tooling around the overlay engine. Each command lives in its own
module under cli/commands/.
"""

import click

from .commands import bench, compose
from .utils import configure_logging


@click.group()
@click.version_option(package_name="lensgraph")
@click.option("-v", "--verbose", is_flag=True, help="Show overlay diagnostics")
def main(verbose: bool):
    """lensgraph: overlay composition for dependency graphs.

    \b
    Quick Start:
      lensgraph compose graph.json --overlays overlays.json
      lensgraph bench --nodes 2000
    """
    configure_logging(verbose)


main.add_command(bench.bench)
main.add_command(compose.compose)

if __name__ == "__main__":
    main()
