#
# Created on 18/10/2026.
#
from typing import List, NamedTuple

from cohortvcf.structure.records import CohortStatistics, VariantRecord

FOUNDER_PREFIX = 'FOUNDER_'
COHORT_AN = 'COHORT_AN'
COHORT_AC = 'COHORT_AC'
COHORT_AF = 'COHORT_AF'
COHORT_HEMI = 'COHORT_Hemi'
COHORT_HET = 'COHORT_Het'
COHORT_HOM = 'COHORT_Hom'

FOUNDER_NOTE = ' (only considering founders from pedigree)'
NO_PEDIGREE_WARNING = ' (WARNING: no pedigree given, inaccurate results on sex chromosomes)'


class InfoField(NamedTuple):
    """Declaration of an INFO field in a VCF header."""
    id: str
    number: str
    type: str
    description: str


def info_field_definitions(pedigree_given: bool) -> List[InfoField]:
    """
    Declarations of all INFO fields written by `annotate`, for the whole cohort and the
    founders, in this order.

    :param pedigree_given: whether a pedigree was given. If not, each description carries a
                           warning about the accuracy of sex chromosome results.
    :return: a list of twelve InfoFields.
    """
    warning = '' if pedigree_given else NO_PEDIGREE_WARNING
    fields = []
    for prefix, note in (('', ''), (FOUNDER_PREFIX, FOUNDER_NOTE)):
        fields += [
            InfoField(prefix + COHORT_AN, '1', 'Integer',
                      f"Total number of alleles in cohort's called genotypes{note}{warning}"),
            InfoField(prefix + COHORT_AC, 'A', 'Integer',
                      f"Allele count in cohort's called genotypes{note}, for each ALT allele, "
                      f"in the same order as listed{warning}"),
            InfoField(prefix + COHORT_AF, 'A', 'Float',
                      f"Allele Frequency in cohort, for each ALT allele{note}, in the same "
                      f"order as listed{warning}"),
            InfoField(prefix + COHORT_HEMI, 'A', 'Integer',
                      f"Cohort's Hemizygous counts, for each ALT allele{note}, in the same "
                      f"order as listed{warning}"),
            InfoField(prefix + COHORT_HET, 'A', 'Integer',
                      f"Cohort's Heterozygous counts, for each ALT allele{note}, in the same "
                      f"order as listed{warning}"),
            InfoField(prefix + COHORT_HOM, 'A', 'Integer',
                      f"Cohort's Homozygous counts, for each ALT allele{note}, in the same "
                      f"order as listed{warning}"),
        ]
    return fields


def declare_info_fields(header, pedigree_given: bool):
    """
    Add the INFO field declarations to a pysam VariantHeader.
    Fields already declared in the header are left as they are.

    :param header: the pysam.VariantHeader of the output file.
    :param pedigree_given: whether a pedigree was given.
    """
    for f in info_field_definitions(pedigree_given):
        if f.id not in header.info:
            header.info.add(f.id, f.number, f.type, f.description)


def annotate(variant: VariantRecord, stats: CohortStatistics, prefix: str = ''):
    """
    Write the statistics of a sample set to the INFO of a variant.

    If no chromosomes were counted, the allele frequency is undefined and
    `{prefix}COHORT_AF` is not written; all other fields are.

    :param variant: the VariantRecord to annotate in place.
    :param stats: the CohortStatistics of the variant.
    :param prefix: prefix of all INFO keys, e.g. FOUNDER_PREFIX.
    """
    variant.info[prefix + COHORT_AN] = int(stats.total_chrom_count)
    variant.info[prefix + COHORT_AC] = tuple(int(x) for x in stats.allele_counts)
    if stats.total_chrom_count > 0:
        variant.info[prefix + COHORT_AF] = tuple(float(x) for x in stats.allele_frequencies)
    else:
        variant.info.pop(prefix + COHORT_AF, None)
    variant.info[prefix + COHORT_HEMI] = tuple(int(x) for x in stats.hemi_counts)
    variant.info[prefix + COHORT_HET] = tuple(int(x) for x in stats.het_counts)
    variant.info[prefix + COHORT_HOM] = tuple(int(x) for x in stats.hom_counts)
