#!/usr/bin/env python

from setuptools import setup, find_packages


def readme():
    with open('readme.txt') as f:
        return f.read()


setup(
    name='tfidfrank',

    # Versions should comply with PEP440.
    # see https://packaging.python.org/en/latest/single_source_version.html
    version='0.1.0',

    description='TF-IDF weighted TextRank: keywords extraction combining corpus-level term weighting '
                'with graph based ranking of word co-occurrence networks',

    long_description=readme(),

    author='Jie Gao',
    author_email='j.gao@sheffield.ac.uk',

    license='MIT',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
      'Development Status :: 4 - Beta',
      'Intended Audience :: Developers',
      'Intended Audience :: Education',
      'Intended Audience :: Information Technology',
      'Intended Audience :: Science/Research',
      'License :: OSI Approved :: MIT License',
      'Operating System :: OS Independent',
      'Programming Language :: Python :: 3 :: Only',
      'Topic :: Scientific/Engineering :: Artificial Intelligence',
      'Topic :: Scientific/Engineering :: Information Analysis',
      'Topic :: Text Processing :: General',
      'Topic :: Text Processing :: Indexing',
      'Topic :: Text Processing :: Linguistic',
    ],

    # What does your project relate to?
    keywords='textrank, tf-idf, keywords extraction, term extraction, natural language processing, nlp, '
             'text analytics, text mining, feature extraction, graph algorithm, pagerank',

    packages=find_packages(exclude=['contrib', 'docs', 'tests']),

    python_requires='>=3.6',

    install_requires=[
          'nltk',
          'networkx'
    ],

    extras_require={
        'test': ['coverage', 'scipy'],
    },

    zip_safe=False)
