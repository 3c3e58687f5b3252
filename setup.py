from setuptools import setup, find_packages

setup(
    name="wallet-balances",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2",
        "structlog",
        "PyYAML",
        "solana",
        "solders",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "wallet-balances=wallet_balances.__main__:main",
        ],
    }
)
