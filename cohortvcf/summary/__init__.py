#
# Created on 18/10/2026.
#
from .counter import count_alleles
from .annotation import annotate, declare_info_fields, info_field_definitions
from .pedigree import PedigreeIndex
from .pipeline import summarize_variants, summarize_cohort_vcf

__all__ = [
    'count_alleles', 'annotate', 'declare_info_fields', 'info_field_definitions',
    'PedigreeIndex', 'summarize_variants', 'summarize_cohort_vcf'
]
