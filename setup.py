from re import search
from setuptools import setup, find_packages

with open("src/ordmap/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="ordmap",
    version=version,
    description="An ordered map for Python with string and object identity keys.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="map ordered dictionary container",
    license="MIT license",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7,<9",
            "pytest-describe>=2,<3",
            "pytest-benchmark>=4,<5",
        ],
    },
    python_requires=">=3.8,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"ordmap": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
