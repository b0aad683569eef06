#!/usr/bin/env python


import codecs
from os import path
import re
from setuptools import setup, find_namespace_packages


# Single-sourcing the package version: Read from __init__
def read(*parts):
    here = path.abspath(path.dirname(__file__))
    with codecs.open(path.join(here, *parts), 'r') as fp:
        return fp.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(
        r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M
    )
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


def read_requirements(*file_paths):
    return [line.strip() for line in read(*file_paths).splitlines()
            if line.strip() and not line.strip().startswith('#')]


readme = read('README.rst')
history = read('HISTORY.rst')
requirements = read_requirements('requirements', 'prod.txt')
test_requirements = read_requirements('requirements', 'test.txt')

setup(
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ],
    description="Cohort-level allele statistics for multi-sample VCF files",
    install_requires=requirements,
    license="MIT license",
    long_description=readme + '\n\n' + history,
    long_description_content_type='text/x-rst',
    include_package_data=True,
    keywords='cohortvcf vcf allele-frequency pedigree',
    name='cohortvcf',
    entry_points={'console_scripts': [
        'cohortvcf = cohortvcf.cli.main:main',
    ], },
    packages=find_namespace_packages(include=['cohortvcf', 'cohortvcf.*']),
    python_requires='>=3.7',
    extras_require={
        'test': test_requirements
    },
    version=find_version("cohortvcf", "__init__.py"),  # update there
    zip_safe=False,
)
