import click


def universal_options(f):
    """Options required by every command."""
    f = click.option('--verb', is_flag=True, help='Log progress messages.')(f)
    return f


def vcf_io_options(f):
    """Input and output VCF paths."""
    f = click.option('--output_vcf', type=click.Path(dir_okay=False), required=True,
                     help='Path of output VCF file. Bgzipped and indexed if ending in .gz.')(f)
    f = click.option('--input_vcf', type=click.Path(exists=True, dir_okay=False), required=True,
                     help='Path to input VCF file.')(f)
    return f


def pedigree_options(f):
    """Options to supply a pedigree."""
    f = click.option('--pedigree', type=click.Path(exists=True, dir_okay=False),
                     required=False, help='Optional path to pedigree (PED) file.')(f)
    return f
