#
# Created on 18/10/2026.
#
from typing import Callable, Iterable, List, Optional

import numpy as np

from cohortvcf.structure.records import CohortStatistics, Genotype, VariantRecord
from cohortvcf.summary.ploidy import ChromosomeClass, chromosome_count, classify_contig

HET = 'het'
HOM_VAR = 'hom_var'


def _alt_indices(genotype: Genotype) -> List[int]:
    """
    0-based ALT allele indices of all non-reference called alleles, in genotype order.
    """
    if genotype is None:
        return []
    return [allele - 1 for allele in genotype if allele is not None and allele > 0]


def classify_genotype(genotype: Genotype) -> Optional[str]:
    """
    Zygosity of a call as a whole.

    A call is heterozygous if it is fully called and holds differing alleles, and homozygous
    variant if it is fully called and only holds one non-reference allele.
    A single called allele counts as homozygous. Calls with missing alleles have no zygosity.

    :param genotype: allele indices of the call.
    :return: HET, HOM_VAR or None (homozygous reference or not fully called).
    """
    if not genotype or any(allele is None for allele in genotype):
        return None
    distinct = set(genotype)
    if len(distinct) > 1:
        return HET
    if distinct != {0}:
        return HOM_VAR
    return None


def count_alleles(
    variant: VariantRecord,
    sample_names: Iterable[str],
    is_male: Callable[[str], bool] = lambda name: False
) -> Optional[CohortStatistics]:
    """
    Count chromosomes, alleles and carriers of each ALT allele of a variant over a set of
    samples.

    Each sample adds its expected number of chromosome copies to the total, whether called
    or not. Allele and carrier counts are collected in two passes per sample:

      - the allele pass adds one allele count per non-reference allele. In a hemizygous
        context only the first non-reference allele is counted, so that each sample adds at
        most one allele and one hemizygous count per site.
      - the genotype pass decides zygosity once per call in a diploid context. A heterozygous
        call adds one Het count to every ALT allele it holds ("1/2" is heterozygous for both
        ALT alleles), a homozygous variant call adds exactly one Hom count.

    Samples without a copy of the chromosome (females on Y) add nothing.

    :param variant: the VariantRecord to count in. It is not modified.
    :param sample_names: names of the samples to count over.
    :param is_male: predicate telling whether a sample is male. Defaults to all female.
    :return: the CohortStatistics, or None for sites on the mitochondrial chromosome.
    :raises ValueError: if a genotype holds an allele index beyond the ALT alleles.
    """
    chrom_class = classify_contig(variant.contig)
    if chrom_class is ChromosomeClass.MITOCHONDRIAL:
        return None

    n_alts = variant.n_alts
    total_chrom_count = 0
    allele_counts = np.zeros(n_alts, dtype=int)
    hemi_counts = np.zeros(n_alts, dtype=int)
    het_counts = np.zeros(n_alts, dtype=int)
    hom_counts = np.zeros(n_alts, dtype=int)

    for name in sorted(sample_names):
        genotype = variant.genotypes.get(name)
        ploidy = chromosome_count(chrom_class, is_male(name))
        total_chrom_count += ploidy
        alt_indices = _alt_indices(genotype)
        if any(idx >= n_alts for idx in alt_indices):
            raise ValueError(f"Genotype {genotype} of sample {name} at {variant!r} refers to a "
                             f"missing ALT allele.")
        if ploidy == 0 or not alt_indices:
            continue

        if ploidy == 1:
            first = alt_indices[0]
            allele_counts[first] += 1
            hemi_counts[first] += 1
            continue

        for idx in alt_indices:
            allele_counts[idx] += 1

        zygosity = classify_genotype(genotype)
        if zygosity == HET:
            for idx in sorted(set(alt_indices)):
                het_counts[idx] += 1
        elif zygosity == HOM_VAR:
            hom_counts[alt_indices[0]] += 1

    return CohortStatistics(
        total_chrom_count=total_chrom_count,
        allele_counts=allele_counts,
        hemi_counts=hemi_counts,
        het_counts=het_counts,
        hom_counts=hom_counts,
    )
