"""
Setup script de gen-info.

Uso:
    pip install -e .
    pip install -e .[test]
"""

from setuptools import find_packages, setup

setup(
    name="gen-info",
    version="0.2.1",
    description="Extrae la información del header de ROMs de SEGA Genesis/Mega Drive",
    packages=find_packages(include=["geninfo", "geninfo.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "gen-info=geninfo.cli:main",
        ],
    },
    zip_safe=False,
)
