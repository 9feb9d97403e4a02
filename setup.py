"""
Setup file.
"""

import os

from setuptools import find_packages, setup

URL = "https://github.com/winres-py/winres"
KEYWORDS = "windows resource rc windres cargo build-script versioninfo icon manifest"
HERE = os.path.dirname(os.path.abspath(__file__))


if __name__ == "__main__":
    setup(
        name="winres",
        version="0.1.0",
        description="Compile Windows resources (version info, icon, manifest) in cargo build scripts",
        keywords=KEYWORDS,
        url=URL,
        python_requires=">=3.9",
        package_dir={"": "src"},
        packages=find_packages(where=os.path.join(HERE, "src")),
        install_requires=[
            'tomli>=1.1.0; python_version < "3.11"',
        ],
        extras_require={
            "test": ["pytest>=7.0"],
        },
        entry_points={
            "console_scripts": ["winres=winres.cli:main"],
        },
    )
