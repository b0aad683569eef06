#
# Created on 18/10/2026.
#
from typing import Iterable, Optional, Sequence

from cohortvcf.structure.records import SampleRecord, Sex
from cohortvcf.summary.annotation import FOUNDER_PREFIX
from cohortvcf.util.errors import ConsistencyError
from cohortvcf.util.logging import get_logger


class PedigreeIndex:
    """
    Sample sets of a cohort, derived from the VCF sample list and an optional pedigree.

    Without a pedigree all VCF samples are used, no founder set exists and all samples are
    assumed to be female (`assume_female`). With a pedigree the pedigree individuals are used,
    and each must be present in the VCF.

    :param vcf_samples: the sample names declared in the VCF header.
    :param sample_records: the SampleRecords of the pedigree, or None if no pedigree was given.
    :param verb: toggle verbosity.
    """
    def __init__(self, vcf_samples: Sequence[str],
                 sample_records: Optional[Iterable[SampleRecord]] = None,
                 verb: bool = False):
        self.logger = get_logger(__name__, verb=verb)
        self.vcf_samples = frozenset(vcf_samples)
        self.pedigree_given = sample_records is not None

        if not self.pedigree_given:
            self.logger.warning(
                'No pedigree given, not computing founder statistics, assuming all samples '
                'being female and using all samples.'
            )
            self.all_samples = self.vcf_samples
            self.founder_samples = None
            self.male_samples = frozenset()
            self.male_founder_samples = frozenset()
            self.assume_female = True
            return

        records = list(sample_records)
        self.all_samples = frozenset(x.name for x in records)
        self.founder_samples = frozenset(x.name for x in records if x.founder)
        self.male_samples = frozenset(x.name for x in records if x.sex is Sex.MALE)
        self.male_founder_samples = self.founder_samples & self.male_samples
        self.assume_female = False

        missing = self.all_samples - self.vcf_samples
        if missing:
            raise ConsistencyError(missing)

        n_unknown = sum(1 for x in records if x.sex is Sex.UNKNOWN)
        if n_unknown:
            self.logger.warning(
                f'{n_unknown} pedigree sample(s) of unknown sex are counted as female, '
                f'results on sex chromosomes may be inaccurate for them.'
            )
        self.logger.info(f'Pedigree loaded: {len(self.all_samples)} samples, '
                         f'{len(self.founder_samples)} founders, '
                         f'{len(self.male_founder_samples)} male founders.')

    def is_male(self, sample_name: str) -> bool:
        if self.assume_female:
            return False
        return sample_name in self.male_samples

    def sample_sets(self):
        """
        Sample sets to summarize, as tuples of (INFO key prefix, sample names).
        The founder set is only included if a pedigree was given.
        """
        sets = [('', self.all_samples)]
        if self.founder_samples is not None:
            sets.append((FOUNDER_PREFIX, self.founder_samples))
        return sets

    def __repr__(self):
        n_founders = 'n/a' if self.founder_samples is None else len(self.founder_samples)
        return f"PedigreeIndex n_samples={len(self.all_samples)} n_founders={n_founders}"

