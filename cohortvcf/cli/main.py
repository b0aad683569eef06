import sys

import click

from cohortvcf import __version__
from cohortvcf.cli.summarize import summarize
from cohortvcf.util.errors import CohortVcfError
from cohortvcf.util.logging import get_logger

logger = get_logger("cohortvcf")


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(version=__version__, prog_name='cohortvcf')
def cli():
    pass


cli.add_command(summarize)


def main(args=None):
    """
    Run the command line interface. Any usage, pedigree, consistency or I/O error
    ends the run with exit code 1.
    """
    try:
        cli.main(args=args, standalone_mode=False)
    except click.exceptions.Abort:
        click.echo('Aborted!', err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except (CohortVcfError, OSError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()
