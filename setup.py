from setuptools import setup

setup(
    name="keybase-local",
    version="0.0.6",
    description="Discovery of a local Keybase installation (Python)",
    author="bcherng",
    packages=[
        "keybase_local",
        "keybase_local.core",
        "keybase_local.platform_specific",
    ],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "keybase-local=keybase_local.cli:main",
        ],
    },
)
