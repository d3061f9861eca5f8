import os

from setuptools import find_packages, setup

_about: dict = {}
with open(os.path.join("src", "picokeypairs", "__about__.py")) as f:
    exec(f.read(), _about)

if __name__ == "__main__":
    setup(
        name="picokeypairs",
        version=_about["__version__"],
        description="Picokeypairs ledger keypair derivation, signing and addresses",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=["base58>=2.1"],
        extras_require={"test": ["pytest"]},
    )
