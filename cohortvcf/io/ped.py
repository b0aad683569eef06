#
# Created on 18/10/2026.
#
from collections import Counter
from typing import List

import pandas as pd

from cohortvcf.structure.records import SampleRecord, Sex
from cohortvcf.util.errors import PedigreeParseError
from cohortvcf.util.logging import get_logger

PED_COLUMNS = ['family', 'name', 'father', 'mother', 'sex', 'phenotype']
SEX_CODES = {'1': Sex.MALE, '2': Sex.FEMALE}
NO_PARENT = '0'


def load_pedigree_file(input_file: str, verb: bool = False) -> List[SampleRecord]:
    """
    Loads a PED file and returns a SampleRecord for each individual.

    The file is whitespace-separated with at least six columns
    (family, individual, father, mother, sex, phenotype); further columns are ignored.
    Lines starting with '#' are comments. Sex is coded 1 (male), 2 (female) or anything else
    (unknown), parents are coded 0 if absent. An individual without parents is a founder.

    :param input_file: The path to the input PED file.
    :param verb: toggle verbosity.
    :return: List[SampleRecord] of individuals in the PED file, in file order.
    """
    logger = get_logger(__name__, verb=verb)
    try:
        ped = pd.read_csv(input_file, sep=r'\s+', comment='#', header=None, dtype=str,
                          keep_default_na=False, na_filter=False)
    except pd.errors.EmptyDataError:
        raise PedigreeParseError(f"Pedigree file {input_file} contains no individuals.")
    except pd.errors.ParserError as e:
        raise PedigreeParseError(f"Could not parse pedigree file {input_file}: {e}")

    if ped.shape[1] < len(PED_COLUMNS):
        raise PedigreeParseError(
            f"Pedigree file {input_file} has {ped.shape[1]} columns, "
            f"at least {len(PED_COLUMNS)} are required."
        )
    ped = ped.iloc[:, :len(PED_COLUMNS)]
    ped.columns = PED_COLUMNS
    # short lines are padded with missing values, names like "NA" are kept as they are
    required = ped[PED_COLUMNS[:5]]
    incomplete = (required.isna() | (required == '')).any(axis=1)
    if incomplete.any():
        raise PedigreeParseError(
            f"Incomplete lines found in pedigree file {input_file}: "
            f"{ped.loc[incomplete, 'name'].tolist()}"
        )

    dupcount = Counter(ped['name'])
    duplicates = [name for name, count in dupcount.items() if count > 1]
    if duplicates:
        raise PedigreeParseError(f"Duplicate individuals found in pedigree file: {duplicates}")

    sample_records = [
        SampleRecord(
            name=row.name,
            sex=SEX_CODES.get(row.sex, Sex.UNKNOWN),
            founder=row.father == NO_PARENT and row.mother == NO_PARENT,
            family=row.family,
            father=None if row.father == NO_PARENT else row.father,
            mother=None if row.mother == NO_PARENT else row.mother,
        ) for row in ped.itertuples(index=False)
    ]
    logger.info(f"Loaded {len(sample_records)} individuals from pedigree file {input_file}.")
    return sample_records
