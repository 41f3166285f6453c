import os, re
from setuptools import setup, find_packages

# Read the README file
with open("README.md") as f:
    linepoints_readme = f.read()

def read_file(filepath: str) -> str:
    """Read and return the content of a file."""
    with open(filepath, "r", encoding="utf-8") as f:
        return f.read().strip()

def get_dependencies() -> list:
    """Retrieve dependencies from the requirements file."""
    depfile = "requirements.txt"
    if os.path.exists(depfile):
        return [
            line.strip() for line in read_file(depfile).splitlines()
            if line.strip() and not line.startswith("#")
        ]
    return []

def get_package_name() -> str:
    """Retrieve the package name from the project directory structure."""
    packages = find_packages(exclude=["tests", "tests.*"])
    if packages:
        return packages[0]
    raise RuntimeError(
        "No package found. Ensure your project contains a valid Python package."
    )

def get_version() -> str:
    """Retrieve the package version from the version file."""
    package = get_package_name()
    versionfile = os.path.join(package, "_version.py")

    if os.path.exists(versionfile):
        verstrline = read_file(versionfile)
        version_match = re.search(
            r"^VERSION_MAJOR = (\d+)\s+VERSION_MINOR = (\d+)\s+VERSION_PATCH = (\d+)",
            verstrline,
            re.M,
        )
        if version_match:
            return ".".join(version_match.groups())
        raise RuntimeError("Unable to find version components in '_version.py'.")

    raise FileNotFoundError("Version file '_version.py' not found.")

extras_require = {
    # Development dependencies
    "dev": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "hypothesis>=6.88.0",  # Property-based testing
        "black>=23.0.0",
        "flake8>=6.0.0",
        "pyright>=1.1.0",
    ],

    # Testing dependencies
    "test": [
        "pytest>=7.4.0",
        "pytest-cov>=4.1.0",
        "hypothesis>=6.88.0",
    ],
}

# Setup the package
if __name__ == '__main__':
    setup(
        name="line-points",
        version=get_version(),
        description="A memoizing line-to-point adapter for drawing vector objects on point-only canvases.",
        long_description=linepoints_readme,
        long_description_content_type="text/markdown",
        license="MIT",
        packages=find_packages(exclude=["tests", "tests.*"]),
        install_requires=get_dependencies(),
        extras_require=extras_require,
        python_requires=">=3.8",
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries :: Python Modules",
            "Topic :: Multimedia :: Graphics",
        ],
        keywords="adapter pattern memoization rasterization geometry",
        entry_points={
            "console_scripts": [
                "linepoints=linepoints.__main__:main",
            ],
        },
    )
