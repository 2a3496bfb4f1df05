import os

from setuptools import setup, find_packages

version_file = os.path.join(os.path.dirname(__file__), "daubechies_filters", "version.py")
with open(version_file, "r") as f:
    exec(f.read())

readme_file = os.path.join(os.path.dirname(__file__), "README.md")
with open(readme_file, "r") as f:
    long_description = f.read()

setup(
    name="daubechies_filters",
    version=__version__,  # noqa: F821 -- loaded by 'exec' above
    packages=find_packages(include=["daubechies_filters", "daubechies_filters.*"]),
    include_package_data=True,
    description="Interior and boundary Daubechies scaling filter coefficients.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPL-3.0-only",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    keywords="wavelets daubechies symmlet boundary-filters interval",
    python_requires=">=3.7",
    install_requires=[
        "numpy",
        "PyWavelets",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "daubechies-filter-viewer=daubechies_filters.scripts.daubechies_filter_viewer:main",
        ],
    },
)
