from setuptools import setup, find_packages

setup(
    name="openlens",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn",
        "pydantic>=2.0.0",
        "slowapi",
        "prometheus-client",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
