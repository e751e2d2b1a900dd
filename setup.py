"""
Review Filter - Setup Configuration

Install in development mode: pip install -e .[dev]
"""

from setuptools import setup, find_packages

setup(
    name="review-filter",
    version="0.1.0",
    description="Rating, date and sort filtering with aggregate statistics for review lists",
    author="Your Name",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pandas>=2.0.0",
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "httpx>=0.24.0",
            "black>=23.7.0",
            "isort>=5.12.0",
            "flake8>=6.1.0",
        ],
    },
)
