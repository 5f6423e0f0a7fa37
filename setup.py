from setuptools import setup, find_packages
from os import path
from io import open

setup_dir = path.abspath(path.dirname(__file__))
with open(path.join(setup_dir, 'README.md'),
          encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name="mobius_tools",
    version="0.1",
    packages=find_packages(include=["mobius_tools", "mobius_tools.*"]),
    include_package_data=True,

    install_requires=[
        "numpy>=1.22",
        "scipy>=1.4"
    ],

    extras_require={
        "test": ["pytest"]
    },

    license="MIT",
    description="""Some tools for working with Mobius transformations of the
    extended complex plane and rotations of the Riemann sphere""",

    long_description=long_description,
    long_description_content_type="text/markdown"
)
