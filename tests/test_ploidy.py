import pytest

from cohortvcf.summary.ploidy import ChromosomeClass, chromosome_count, classify_contig


@pytest.mark.parametrize('contig', ['x', 'X', '23', 'chrx', 'chrX', 'chr23'])
def test_classify_x(contig):
    assert classify_contig(contig) is ChromosomeClass.X


@pytest.mark.parametrize('contig', ['y', 'Y', '24', 'chry', 'chrY', 'chr24'])
def test_classify_y(contig):
    assert classify_contig(contig) is ChromosomeClass.Y


@pytest.mark.parametrize('contig', ['m', 'M', 'mt', 'MT', 'chrm', 'chrM', 'chrmt', 'chrMT'])
def test_classify_mitochondrial(contig):
    assert classify_contig(contig) is ChromosomeClass.MITOCHONDRIAL


@pytest.mark.parametrize('contig', ['1', 'chr1', '22', 'chr22', 'GL000192.1', 'chrXY', 'XX'])
def test_classify_autosome(contig):
    assert classify_contig(contig) is ChromosomeClass.AUTOSOME


@pytest.mark.parametrize('chrom_class,is_male,expected', [
    (ChromosomeClass.AUTOSOME, True, 2),
    (ChromosomeClass.AUTOSOME, False, 2),
    (ChromosomeClass.X, True, 1),
    (ChromosomeClass.X, False, 2),
    (ChromosomeClass.Y, True, 1),
    (ChromosomeClass.Y, False, 0),
])
def test_chromosome_count(chrom_class, is_male, expected):
    assert chromosome_count(chrom_class, is_male) == expected


def test_chromosome_count_mitochondrial():
    with pytest.raises(ValueError):
        chromosome_count(ChromosomeClass.MITOCHONDRIAL, False)
