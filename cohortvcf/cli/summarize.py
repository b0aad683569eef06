import click

from cohortvcf.cli.generic_opt import universal_options, vcf_io_options, pedigree_options


@click.command(context_settings=dict(help_option_names=["-h", "--help"]),
               short_help="Generate summary VCF from whole-cohort VCF.")
@vcf_io_options
@pedigree_options
@universal_options
def summarize(input_vcf, output_vcf, pedigree=None, verb=False):
    """
    Compute allele numbers, counts and frequencies as well as hemizygous, heterozygous and
    homozygous counts for each ALT allele of a whole-cohort VCF, and write them to the INFO
    column of a VCF without genotypes.
    If a pedigree is given, statistics are additionally computed over the founders only, and
    the sex of each sample is taken into account on the sex chromosomes.
    """
    from cohortvcf.summary.pipeline import summarize_cohort_vcf
    summarize_cohort_vcf(input_vcf=input_vcf, output_vcf=output_vcf, pedigree=pedigree,
                         verb=verb)
    click.echo('All done. Have a nice day!', err=True)
