from setuptools import setup

from app.__version__ import __version_string__

setup(
    name="PyINES",
    version=__version_string__,
    description="Decoder and loader for iNES (.nes) cartridge images",
    packages=["pyines", "pyines.util"],
    package_dir={"pyines": "app/pyines"},
    python_requires=">=3.11",
    install_requires=[
        "numpy",
        "returns",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["pyines=pyines.__main__:main"],
    },
    include_package_data=True,
    zip_safe=False,
)
