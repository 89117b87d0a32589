from pathlib import Path

import setuptools

_ROOT = Path(__file__).parent

# Read the version without importing the package (see versort/version.py)
_version = {}
exec((_ROOT / "versort" / "version.py").read_text(), _version)

setuptools.setup(
    name='versort',
    version=_version['VERSORT_VERSION_STRING'],
    description='Sort version strings in natural release order (1.0.0-rc1 < 1.0.0 < 1.0.0p1)',
    long_description=(_ROOT / "README.md").read_text(),
    long_description_content_type="text/markdown",
    platforms=['any'],
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    entry_points={
        'console_scripts': ['versort=versort.versort_main:main']
    },
    license='MIT',
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Build Tools',
        'Topic :: Text Processing :: Filters',
    ],
    install_requires=['llsd'],
    extras_require={
        'dev': ['pytest', 'pytest-cov'],
    },
    python_requires='>=3.8',
)
