from setuptools import setup

setup(
    name="playerio-network",
    author="playerio-network contributors",
    version="1.0",
    package_dir={'': 'src'},
    package_data={"playerio_network": ["py.typed"]},
    packages=["playerio_network", "playerio_network.protocol", "playerio_network.protocol.messages"],
    python_requires=">=3.8",
    install_requires=[
        "aiohttp>=3.8",
        "betterproto>=1.2.5",
        "galaxy.plugin.api>=0.65",
    ],
    extras_require={
        "test": ["pytest>=7.0", "pytest-asyncio>=0.21"],
    },
)
