#!/usr/bin/env python
# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# cmdscale
#
# This file is part of the cmdscale project.
#
# Licensed under the MIT License (see LICENSE for details)
# ----------------------------------------------------------------------------

from setuptools import setup, find_packages

setup(
    name='cmdscale',
    version='0.1.0',
    description='Classical Multidimensional Scaling of Dissimilarity and Similarity Data',
    long_description=(
        'Computes classical (Torgerson) multidimensional scaling embeddings from '
        'dissimilarity matrices, compact distance vectors or similarity matrices, '
        'with full or truncated eigendecomposition and a deterministic sign convention.'),
    author='cmdscale developers',
    license='MIT',
    packages=find_packages('src'),  # Automatically find packages in the src directory
    package_dir={'': 'src'},
    install_requires=[
        'numba',
        'numpy',
        'scipy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        'Operating System :: MacOS',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
    python_requires='>=3.9',
    keywords='multidimensional scaling, classical scaling, dissimilarity data, embedding',
)
