from setuptools import find_packages, setup

setup(
    name="readycash",
    version="0.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "cryptography>=43",
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
            "fastapi",
            "uvicorn",
        ],
    },
)
