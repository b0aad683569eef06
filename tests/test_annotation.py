import numpy as np

from cohortvcf.structure.records import CohortStatistics, VariantRecord
from cohortvcf.summary.annotation import (annotate, info_field_definitions, FOUNDER_PREFIX,
                                          FOUNDER_NOTE, NO_PEDIGREE_WARNING)


def make_stats(an, ac, hemi=(0, 0), het=(0, 0), hom=(0, 0)):
    return CohortStatistics(total_chrom_count=an, allele_counts=np.array(ac),
                            hemi_counts=np.array(hemi), het_counts=np.array(het),
                            hom_counts=np.array(hom))


def make_variant():
    return VariantRecord(contig='1', position=100, ref='A', alts=['G', 'T'], genotypes={},
                         info={'DP': 10})


def test_annotate():
    variant = make_variant()
    annotate(variant, make_stats(8, (2, 1), het=(2, 1)))
    assert variant.info == {
        'DP': 10,
        'COHORT_AN': 8,
        'COHORT_AC': (2, 1),
        'COHORT_AF': (0.25, 0.125),
        'COHORT_Hemi': (0, 0),
        'COHORT_Het': (2, 1),
        'COHORT_Hom': (0, 0),
    }
    assert all(type(x) is int for x in variant.info['COHORT_AC'])


def test_annotate_founders():
    variant = make_variant()
    annotate(variant, make_stats(8, (2, 1)))
    annotate(variant, make_stats(4, (1, 0)), prefix=FOUNDER_PREFIX)
    assert variant.info['COHORT_AN'] == 8
    assert variant.info['FOUNDER_COHORT_AN'] == 4
    assert variant.info['FOUNDER_COHORT_AF'] == (0.25, 0.0)


def test_annotate_without_chromosomes_omits_frequency():
    variant = make_variant()
    annotate(variant, make_stats(0, (0, 0)), prefix=FOUNDER_PREFIX)
    assert variant.info['FOUNDER_COHORT_AN'] == 0
    assert variant.info['FOUNDER_COHORT_AC'] == (0, 0)
    assert 'FOUNDER_COHORT_AF' not in variant.info


def test_info_field_definitions():
    fields = info_field_definitions(pedigree_given=True)
    assert [f.id for f in fields] == [
        'COHORT_AN', 'COHORT_AC', 'COHORT_AF', 'COHORT_Hemi', 'COHORT_Het', 'COHORT_Hom',
        'FOUNDER_COHORT_AN', 'FOUNDER_COHORT_AC', 'FOUNDER_COHORT_AF', 'FOUNDER_COHORT_Hemi',
        'FOUNDER_COHORT_Het', 'FOUNDER_COHORT_Hom',
    ]
    assert [f.number for f in fields[:6]] == ['1', 'A', 'A', 'A', 'A', 'A']
    assert fields[2].type == 'Float'
    assert all(f.type == 'Integer' for f in fields if not f.id.endswith('AF'))
    assert all(FOUNDER_NOTE in f.description for f in fields[6:])
    assert not any(FOUNDER_NOTE in f.description for f in fields[:6])
    assert not any(NO_PEDIGREE_WARNING in f.description for f in fields)


def test_info_field_definitions_without_pedigree():
    fields = info_field_definitions(pedigree_given=False)
    assert len(fields) == 12
    assert all(f.description.endswith(NO_PEDIGREE_WARNING) for f in fields)
