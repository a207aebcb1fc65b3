#! /usr/bin/env python

from setuptools import setup

package_dirs = {
    "valueset": "src/packages/valueset",
    }
packages = [
    "valueset",
    ]
versionDict = {}
with open("src/packages/valueset/version.py") as fp:
    exec(fp.read(), versionDict)
common_setup_options = {
    "name": "valueset",
    "version": versionDict["version"],
    "description": "An unordered set of unique values with set algebra"
                   " and functional combinators.",
    "package_dir": package_dirs,
    "packages": packages,
    "license": "BSD",
    "python_requires": ">=3.8",
    "extras_require": {
        "test": ["pylint", "pytest"],
        },
}

def run(**setup_options):
    options = common_setup_options.copy()
    options.update(setup_options)
    setup(**options)

if __name__ == "__main__":
    run()
