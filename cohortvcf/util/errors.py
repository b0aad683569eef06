#
# Created on 18/10/2026.
#
class CohortVcfError(RuntimeError):
    """Base class of all errors which abort a cohortvcf run."""


class ConfigurationError(CohortVcfError):
    """Required input or output paths are missing or unusable."""


class PedigreeParseError(CohortVcfError):
    """The pedigree file could not be parsed into sample records."""


class ConsistencyError(CohortVcfError):
    """
    Pedigree and VCF disagree on the sample names.

    The names absent from the VCF sample list are kept in `missing`.
    """
    def __init__(self, missing):
        self.missing = sorted(missing)
        super().__init__(
            f"The following samples are in the PED file but missing in the VCF file: "
            f"{', '.join(self.missing)}"
        )
