from setuptools import setup, find_packages
import os

install_requires = ["lark", "pydantic>=2", "libsass", "wcmatch"]

# Define optional dependencies for development
extras_require = {"dev": ["pytest"]}

setup(
    name="sass-stage",
    version="1.0.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">=3.9",
    include_package_data=True,
    package_data={"sassstage.compiler": ["*.lark"]},
    description="A Sass/SCSS build stage with layered import resolution for incremental build pipelines.",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
