#
# Created on 18/10/2026.
#
from enum import Enum
from typing import Dict, FrozenSet


class ChromosomeClass(Enum):
    AUTOSOME = 'autosome'
    X = 'X'
    Y = 'Y'
    MITOCHONDRIAL = 'MT'


# Accepted spellings of the special chromosomes; any other contig is an autosome.
CONTIG_ALIASES: Dict[ChromosomeClass, FrozenSet[str]] = {
    ChromosomeClass.X: frozenset({'x', 'X', '23', 'chrx', 'chrX', 'chr23'}),
    ChromosomeClass.Y: frozenset({'y', 'Y', '24', 'chry', 'chrY', 'chr24'}),
    ChromosomeClass.MITOCHONDRIAL: frozenset({'m', 'M', 'mt', 'MT', 'chrm', 'chrM', 'chrmt',
                                              'chrMT'}),
}

_CONTIG_LOOKUP: Dict[str, ChromosomeClass] = {
    name: chrom_class for chrom_class, names in CONTIG_ALIASES.items() for name in names
}


def classify_contig(contig: str) -> ChromosomeClass:
    """
    Classify a contig name into autosome, X, Y or mitochondrial chromosome.

    :param contig: the contig name as given in the VCF.
    :return: the ChromosomeClass of the contig.
    """
    return _CONTIG_LOOKUP.get(contig, ChromosomeClass.AUTOSOME)


def chromosome_count(chrom_class: ChromosomeClass, is_male: bool) -> int:
    """
    Number of copies of a chromosome expected in a sample.

    Samples of unknown sex must be passed with `is_male=False`: they are counted as females.
    This is a simplification, results on the sex chromosomes are only accurate for samples
    with known sex.

    :param chrom_class: class of the chromosome the site is located on.
    :param is_male: whether the sample is known to be male.
    :return: 2 for diploid, 1 for hemizygous and 0 for absent chromosomes.
    """
    if chrom_class is ChromosomeClass.MITOCHONDRIAL:
        raise ValueError('Ploidy of the mitochondrial chromosome is not defined.')
    if chrom_class is ChromosomeClass.AUTOSOME:
        return 2
    if is_male:
        return 1
    return 2 if chrom_class is ChromosomeClass.X else 0
