#
# Created on 18/10/2026.
#
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field

import numpy as np


Genotype = Optional[Tuple[Optional[int], ...]]


class Sex(Enum):
    MALE = 'male'
    FEMALE = 'female'
    UNKNOWN = 'unknown'


@dataclass(frozen=True)
class SampleRecord:
    """
    A single individual of the pedigree, referenced by `name`.
    The individual is a founder if neither parent is recorded in the pedigree.
    """
    name: str
    sex: Sex
    founder: bool
    family: Optional[str] = None
    father: Optional[str] = None
    mother: Optional[str] = None

    def __repr__(self):
        return f"{self.name} sex={self.sex.value} founder={self.founder}"


@dataclass
class VariantRecord:
    """
    One variant site of the cohort.

    `genotypes` maps each sample name to its called allele indices
    (0 is the reference, 1..N index into `alts`). A missing allele is None,
    a missing call may also be None altogether.
    `info` holds the annotations of the site and is modified in place.
    `source` is the record of the upstream parser this record was built from, if any.
    """
    contig: str
    position: int
    ref: str
    alts: List[str]
    genotypes: Dict[str, Genotype]
    info: Dict[str, Any] = field(default_factory=dict)
    source: Any = field(default=None, repr=False, compare=False)

    @property
    def n_alts(self) -> int:
        return len(self.alts)

    def __repr__(self):
        return f"{self.contig}:{self.position} {self.ref}>{','.join(self.alts) or '.'}"


@dataclass
class CohortStatistics:
    """
    Allele statistics of one variant over one set of samples.
    All arrays are aligned with the alternate alleles of the variant.
    """
    total_chrom_count: int
    allele_counts: np.ndarray
    hemi_counts: np.ndarray
    het_counts: np.ndarray
    hom_counts: np.ndarray

    @property
    def allele_frequencies(self) -> np.ndarray:
        """
        Allele counts divided by the total chromosome count.
        Every frequency is NaN if no chromosomes were counted.
        """
        if self.total_chrom_count == 0:
            return np.full(len(self.allele_counts), np.nan)
        return self.allele_counts / self.total_chrom_count

    def __repr__(self):
        return (f"AN={self.total_chrom_count} AC={self.allele_counts.tolist()} "
                f"Hemi={self.hemi_counts.tolist()} Het={self.het_counts.tolist()} "
                f"Hom={self.hom_counts.tolist()}")
