#!/usr/bin/env python3

from pathlib import Path

from setuptools import find_namespace_packages, setup

packages = find_namespace_packages(include=("inline_accept", "inline_accept.*"))
package_data = {
    "inline_accept": ("py.typed",),
    "inline_accept.config": ("*.yml",),
    "inline_accept.locale": ("*.yml",),
}
install_requires = Path("requirements.txt").read_text().splitlines()

setup(
    name="inline-accept",
    python_requires=">=3.8.2",
    version="0.1.0",
    description="Accept inline completions without clobbering the rest of the line",
    long_description=Path("README.md").read_text(),
    long_description_content_type="text/markdown",
    packages=packages,
    package_data=package_data,
    install_requires=install_requires,
    extras_require={"test": ("pytest",)},
)
