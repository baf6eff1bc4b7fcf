import re
from pathlib import Path

from setuptools import find_packages, setup

_about = (Path(__file__).parent / "src" / "eip712recover" / "__about__.py").read_text()
_version = re.search(r'__version__ = "([^"]+)"', _about).group(1)

if __name__ == "__main__":
    setup(
        name="eip712recover",
        version=_version,
        description="EIP-712 typed-data hashing and signer recovery",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=[],
        extras_require={"test": ["pytest"]},
    )
