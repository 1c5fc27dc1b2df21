#!/usr/bin/env python

from setuptools import setup

def readme():
    with open('README.md') as f:
        return f.read()

setup(
    name='Keypunch',
    version='0.1',
    description='Punch COBOL source onto images of punched cards',
    long_description=readme(),
    classifiers=[],
    keywords='punched-cards cobol jcl pdf',
    author='Poul-Henning Kamp',
    author_email='phk@FreeBSD.org',
    license='BSD',
    packages=['keypunch'],
    install_requires=[
        'imageio',
        'numpy',
        'Pillow',
        'reportlab',
    ],
    extras_require={
        'test': ['pytest', 'pypdf'],
    },
    entry_points={
        'console_scripts': ['keypunch=keypunch.__main__:cli'],
    },
    zip_safe=False
)
