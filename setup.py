from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="picorecover",
        version="0.1.0",
        description="Picorecover ECDSA public key recovery (secp256k1)",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=["ecdsa>=0.18"],
        extras_require={"test": ["pytest"]},
    )
