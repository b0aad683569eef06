#
# Created on 18/10/2026.
#
from typing import Iterable, Iterator, Optional

from cohortvcf.io.ped import load_pedigree_file
from cohortvcf.io.vcf import open_vcf, vcf_sample_names, iter_variant_records, SitesOnlyVcfWriter
from cohortvcf.structure.records import VariantRecord
from cohortvcf.summary.annotation import annotate, declare_info_fields
from cohortvcf.summary.counter import count_alleles
from cohortvcf.summary.pedigree import PedigreeIndex
from cohortvcf.summary.ploidy import ChromosomeClass, classify_contig
from cohortvcf.util.errors import ConfigurationError
from cohortvcf.util.logging import get_logger


def summarize_variants(
    variants: Iterable[VariantRecord],
    pedigree_index: PedigreeIndex,
    verb: bool = False
) -> Iterator[VariantRecord]:
    """
    Annotate each variant with the cohort statistics of all samples and, if a pedigree was
    given, of the founders. Variants on the mitochondrial chromosome are passed on unchanged.
    Variants are yielded one at a time, in input order.

    :param variants: the VariantRecords to annotate.
    :param pedigree_index: the PedigreeIndex of the cohort.
    :param verb: toggle verbosity.
    :return: a generator of the annotated VariantRecords.
    """
    logger = get_logger(__name__, verb=verb)
    sample_sets = pedigree_index.sample_sets()
    n_annotated = n_skipped = 0
    prev_contig = None
    for variant in variants:
        if variant.contig != prev_contig:
            logger.info(f'Starting on {variant.contig}')
            prev_contig = variant.contig
        if classify_contig(variant.contig) is ChromosomeClass.MITOCHONDRIAL:
            n_skipped += 1
            yield variant
            continue
        for prefix, sample_names in sample_sets:
            stats = count_alleles(variant, sample_names, is_male=pedigree_index.is_male)
            annotate(variant, stats, prefix=prefix)
        n_annotated += 1
        yield variant
    logger.info(f'Annotated {n_annotated} variants, passed on {n_skipped} mitochondrial '
                f'variants unchanged.')


def summarize_cohort_vcf(input_vcf: str, output_vcf: str, pedigree: Optional[str] = None,
                         verb: bool = False):
    """
    Write a genotype-free VCF summarizing the allele statistics of a whole-cohort VCF.

    :param input_vcf: The path to the input VCF file.
    :param output_vcf: The path to the output VCF file. If it ends in '.gz', the output is
                       bgzipped and indexed.
    :param pedigree: The path to an optional PED file. Founder statistics are only computed
                     and sex chromosomes only counted accurately if it is given.
    :param verb: toggle verbosity.
    """
    logger = get_logger(__name__, verb=verb)
    if not input_vcf or not output_vcf:
        raise ConfigurationError('Paths to both the input and the output VCF are required.')

    sample_records = load_pedigree_file(pedigree, verb=verb) if pedigree is not None else None
    with open_vcf(input_vcf) as vcf, open_vcf(input_vcf, sites_only=True) as sites_vcf:
        pedigree_index = PedigreeIndex(vcf_sample_names(vcf), sample_records, verb=verb)
        declare_info_fields(sites_vcf.header, pedigree_given=pedigree_index.pedigree_given)

        logger.info('Processing VCF file...')
        variants = iter_variant_records(vcf, sites_vcf=sites_vcf)
        with SitesOnlyVcfWriter(output_vcf, sites_vcf.header, verb=verb) as writer:
            for variant in summarize_variants(variants, pedigree_index, verb=verb):
                writer.write(variant)
    logger.info(f'Summary written to {output_vcf}.')
