"""Setup url_matcher."""

from setuptools import find_packages, setup

with open("README.md") as f:
    readme = f.read()


extra_reqs = {"test": ["pytest", "pytest-cov"]}


setup(
    name="url-matcher",
    version="1.0.0",
    description="Match URLs against path patterns with named placeholders",
    long_description=readme,
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="URL path pattern matching routing",
    license="BSD",
    packages=find_packages(exclude=["ez_setup", "examples", "tests"]),
    include_package_data=True,
    zip_safe=False,
    extras_require=extra_reqs,
)
