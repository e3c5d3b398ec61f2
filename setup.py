"""Setup script for mimedesc MIME type descriptions."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="mimedesc",
    version="0.1.0",
    author="mimedesc Team",
    description="Human-friendly MIME type descriptions from the freedesktop.org shared-mime-info database",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        # Generation step only; the runtime lookup is pure Python
        "requests>=2.31.0",
        "lxml>=4.9.0",
        "Jinja2>=3.1.0",
        "black>=23.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "flake8>=6.0.0",
            "mypy>=1.5.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.10",
    ],
)
