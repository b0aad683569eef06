from pathlib import Path

DATA_PATH = (Path(__file__).parent/'test_data')
COHORT_VCF = DATA_PATH/'cohort.vcf'
COHORT_PED = DATA_PATH/'cohort.ped'
