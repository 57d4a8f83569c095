from setuptools import find_packages, setup

setup(
    name="async-rest-client",
    version="1.0.0",
    description="Asynchronous REST client with TLS, proxy and trace logging support",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        # HTTP client dependencies
        "httpx>=0.28.0",
        # Logging dependencies
        "structlog>=23.2.0",
        "python-json-logger>=3.1.0",
        # Config dependencies
        "pydantic>=2.10.0",
        "pydantic-settings>=2.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.23.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.0.0",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.11",
    ],
)
