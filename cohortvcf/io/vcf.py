#
# Created on 18/10/2026.
#
import hashlib
import os
from typing import Iterator, List

import pysam

from cohortvcf.structure.records import VariantRecord
from cohortvcf.util.logging import get_logger

COMPRESSED_SUFFIXES = ('.gz', '.bgz')
PARTIAL_SUFFIX = '.partial'


def open_vcf(input_file: str, sites_only: bool = False) -> pysam.VariantFile:
    """
    Open a (possibly bgzipped) VCF or BCF file for reading.

    :param input_file: The path to the input VCF file.
    :param sites_only: if True, the samples are dropped from the header and all records.
    :return: the opened pysam.VariantFile.
    """
    vcf = pysam.VariantFile(str(input_file), 'r')
    if sites_only:
        vcf.subset_samples([])
    return vcf


def vcf_sample_names(vcf: pysam.VariantFile) -> List[str]:
    return list(vcf.header.samples)


def to_variant_record(record: pysam.VariantRecord, source: pysam.VariantRecord = None
                      ) -> VariantRecord:
    """
    Convert a pysam record into a VariantRecord.

    :param record: the record holding the genotypes.
    :param source: the record to write out for this variant, `record` itself if not given.
    :return: the VariantRecord.
    """
    return VariantRecord(
        contig=record.chrom,
        position=record.pos,
        ref=record.ref,
        alts=list(record.alts or ()),
        genotypes={name: call.get('GT') for name, call in record.samples.items()},
        info=dict(record.info),
        source=record if source is None else source,
    )


def iter_variant_records(vcf: pysam.VariantFile, sites_vcf: pysam.VariantFile = None
                         ) -> Iterator[VariantRecord]:
    """
    Iterate the records of a VCF as VariantRecords.

    If `sites_vcf` is given, it must be the same file opened with `sites_only=True`. Both files
    are read in lockstep, and each VariantRecord gets the sample-free record as `source`.
    """
    if sites_vcf is None:
        for record in vcf:
            yield to_variant_record(record)
        return
    sites = iter(sites_vcf)
    for record in vcf:
        site = next(sites, None)
        if site is None or (site.chrom, site.pos, site.alleles) != \
                (record.chrom, record.pos, record.alleles):
            raise ValueError(f'Sites-only reader out of step at {record.chrom}:{record.pos}.')
        yield to_variant_record(record, source=site)


def md5_file(filename: str) -> str:
    md5 = hashlib.md5()
    with open(filename, 'rb') as fin:
        for chunk in iter(lambda: fin.read(1 << 20), b''):
            md5.update(chunk)
    return md5.hexdigest()


class SitesOnlyVcfWriter:
    """
    Writes VariantRecords to a VCF file without genotype columns.

    Each VariantRecord must carry a record of a sites-only reader as `source`
    (see `open_vcf`); its INFO is replaced by the INFO of the VariantRecord.
    The file is written to '<output_file>.partial' and only moved to `output_file` once
    closed without error; after an error the partial file is removed.
    Output files ending in '.gz' or '.bgz' are BGZF-compressed and tabix-indexed;
    for every output file an MD5 checksum is written to '<output_file>.md5'.

    :param output_file: The output file path.
    :param header: the pysam.VariantHeader of the sites-only reader.
    :param verb: toggle verbosity.
    """
    def __init__(self, output_file: str, header: pysam.VariantHeader, verb: bool = False):
        self.logger = get_logger(__name__, verb=verb)
        self.output_file = str(output_file)
        self.partial_file = self.output_file + PARTIAL_SUFFIX
        self.compressed = self.output_file.endswith(COMPRESSED_SUFFIXES)
        self.vcf = pysam.VariantFile(self.partial_file, 'wz' if self.compressed else 'w',
                                     header=header)

    def write(self, variant: VariantRecord):
        record = variant.source
        if record is None:
            raise ValueError(f'No sites-only record to write for variant {variant!r}.')
        for key in [k for k in record.info if k not in variant.info]:
            del record.info[key]
        for key, value in variant.info.items():
            if isinstance(value, tuple) and not value:
                if key in record.info:
                    del record.info[key]
                continue
            if record.info.get(key) != value:
                record.info[key] = value
        self.vcf.write(record)

    def close(self):
        self.vcf.close()
        os.replace(self.partial_file, self.output_file)
        if self.compressed:
            pysam.tabix_index(self.output_file, preset='vcf', force=True)
            self.logger.info(f'Index written to {self.output_file}.tbi')
        else:
            self.logger.info('Output is not BGZF-compressed, no index is written.')
        with open(f'{self.output_file}.md5', 'w') as fout:
            fout.write(f'{md5_file(self.output_file)}\n')

    def discard(self):
        self.vcf.close()
        if os.path.exists(self.partial_file):
            os.remove(self.partial_file)
        self.logger.warning(f'Run failed, no output written to {self.output_file}.')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.close()
        else:
            self.discard()
