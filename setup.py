from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e .[test]'
"""

INSTALL_REQUIRES = [
    "msgspec>=0.18",
    "base58>=2.1",
    "bech32>=1.2",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=7.4",
    ],
}


setup(
    name="counterparty_unpack",
    version="0.1.0",
    description="Decode and verify Counterparty messages carried in Bitcoin OP_RETURN outputs",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
)
