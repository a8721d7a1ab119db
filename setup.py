# setup.py
from setuptools import setup, find_packages

setup(
    name="sdscheme",
    version="0.1.0",
    description="A small Scheme interpreter with a batch runner and language server",
    packages=find_packages(include=["sdscheme", "sdscheme.*", "sdscheme_lsp", "sdscheme_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "sdscheme-run=sdscheme.runner:main",
            "sdscheme-ls=sdscheme_lsp.server:main",
        ],
    },
    zip_safe=False,
)
