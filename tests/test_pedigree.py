import pytest

from cohortvcf.io.ped import load_pedigree_file
from cohortvcf.structure.records import SampleRecord, Sex
from cohortvcf.summary.annotation import FOUNDER_PREFIX
from cohortvcf.summary.pedigree import PedigreeIndex
from cohortvcf.util.errors import ConsistencyError, PedigreeParseError

from . import COHORT_PED, DATA_PATH

VCF_SAMPLES = ['father', 'mother', 'son', 'daughter']


class TestLoadPedigree:
    def test_load(self):
        records = load_pedigree_file(COHORT_PED)
        assert [x.name for x in records] == VCF_SAMPLES
        father, mother, son, daughter = records
        assert father.sex is Sex.MALE and father.founder
        assert mother.sex is Sex.FEMALE and mother.founder
        assert son.sex is Sex.MALE and not son.founder
        assert son.father == 'father' and son.mother == 'mother'
        assert daughter.family == 'FAM'

    def test_unknown_sex(self):
        records = load_pedigree_file(DATA_PATH/'unknown_sex.ped')
        assert [x.sex for x in records] == [Sex.UNKNOWN, Sex.FEMALE, Sex.UNKNOWN, Sex.FEMALE]

    @pytest.mark.parametrize('ped_file', [
        'too_few_columns.ped', 'duplicate.ped', 'incomplete.ped'
    ])
    def test_malformed(self, ped_file):
        with pytest.raises(PedigreeParseError):
            load_pedigree_file(DATA_PATH/ped_file)

    def test_na_like_names(self):
        records = load_pedigree_file(DATA_PATH/'na_names.ped')
        assert [x.name for x in records] == ['NA', 'null', 'None', 'nan']
        assert records[2].father == 'NA' and records[2].mother == 'null'
        assert not records[2].founder
        assert records[0].founder and records[0].sex is Sex.MALE

    def test_empty(self, tmp_path):
        ped_file = tmp_path/'empty.ped'
        ped_file.write_text('# only a comment\n')
        with pytest.raises(PedigreeParseError):
            load_pedigree_file(ped_file)


class TestPedigreeIndex:
    def test_sample_sets(self):
        index = PedigreeIndex(VCF_SAMPLES, load_pedigree_file(COHORT_PED))
        assert index.pedigree_given
        assert index.all_samples == set(VCF_SAMPLES)
        assert index.founder_samples == {'father', 'mother'}
        assert index.male_samples == {'father', 'son'}
        assert index.male_founder_samples == {'father'}
        assert index.founder_samples <= index.all_samples
        assert index.male_founder_samples <= index.founder_samples
        assert index.is_male('son')
        assert not index.is_male('daughter')
        assert index.sample_sets() == [('', index.all_samples),
                                       (FOUNDER_PREFIX, index.founder_samples)]

    def test_pedigree_subset_of_vcf(self):
        records = [SampleRecord(name='father', sex=Sex.MALE, founder=True)]
        index = PedigreeIndex(VCF_SAMPLES, records)
        assert index.all_samples == {'father'}

    def test_no_pedigree(self):
        index = PedigreeIndex(VCF_SAMPLES)
        assert not index.pedigree_given
        assert index.assume_female
        assert index.all_samples == set(VCF_SAMPLES)
        assert index.founder_samples is None
        assert not any(index.is_male(x) for x in VCF_SAMPLES)
        assert index.sample_sets() == [('', index.all_samples)]

    def test_unknown_sex_is_female(self):
        index = PedigreeIndex(VCF_SAMPLES, load_pedigree_file(DATA_PATH/'unknown_sex.ped'))
        assert not index.is_male('father')
        assert not index.is_male('son')

    def test_missing_samples(self):
        with pytest.raises(ConsistencyError) as e:
            PedigreeIndex(VCF_SAMPLES, load_pedigree_file(DATA_PATH/'missing_samples.ped'))
        assert e.value.missing == ['stranger', 'uncle']

    def test_empty_founders(self):
        records = [SampleRecord(name='son', sex=Sex.MALE, founder=False)]
        index = PedigreeIndex(VCF_SAMPLES, records)
        assert index.founder_samples == frozenset()
        assert len(index.sample_sets()) == 2
