from setuptools import setup, find_packages

setup(
    name="wavechat-core",
    version="0.1.0",
    description="WaveChat - local data layer for voice-first conversations",
    author="WaveChat Team",
    packages=find_packages(include=["wavechat", "wavechat.*"]),
    python_requires=">=3.8",
    install_requires=[
        # Core dependencies - keep minimal
        "pyyaml>=6.0",        # For configuration files
        "jsonschema>=4.0.0",  # For validating stored collections
        "numpy>=1.24.0",      # For synthetic waveforms and transcripts
        "fastapi>=0.100.0",   # For the HTTP API
        "pydantic>=2.0.0",    # For API request models
        "uvicorn>=0.23.0",    # For serving the HTTP API
        "python-dotenv>=1.0.1"
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",   # For testing
            "pytest-asyncio>=0.21.0",  # For coroutine tests
            "pytest-cov>=4.0.0", # For test coverage
            "httpx>=0.24.0",   # For the FastAPI TestClient
            "black>=23.0.0",   # For code formatting
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wavechat=wavechat.__main__:main",
        ],
    },
)
