"""Setup script for Playlist Time Calculator."""

from setuptools import setup, find_packages
from pathlib import Path


def read_requirements(name):
    requirements_path = Path(__file__).parent / name
    with open(requirements_path, 'r', encoding='utf-8') as f:
        return [
            line.strip() for line in f
            if line.strip() and not line.startswith('#')
        ]


# Read README
readme_path = Path(__file__).parent / 'README.md'
with open(readme_path, 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='playlist-time-calculator',
    version='0.1.0',
    description='Playlist duration, end time and target time calculator with text import',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='Playlist Time Calculator Contributors',
    python_requires='>=3.9',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'test': read_requirements('requirements-test.txt'),
    },
    entry_points={
        'console_scripts': [
            'playlist-time-calculator=playlist_time_calculator.cli:app',
            'playlist-time=playlist_time_calculator.cli:app',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],
)
