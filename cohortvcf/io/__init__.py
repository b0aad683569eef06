#
# Created on 18/10/2026.
#
from .ped import load_pedigree_file
from .vcf import open_vcf, iter_variant_records, SitesOnlyVcfWriter

__all__ = [
    'load_pedigree_file', 'open_vcf', 'iter_variant_records', 'SitesOnlyVcfWriter'
]
