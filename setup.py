#
# Copyright (c) 2006-2013, Prometheus Research, LLC
#


#
# This is a setup script for a development version of SQLLex.
# Type `pip install .` to install SQLLex;
# type `pip install -e .[test]` to install it in a development mode
# together with the test requirements.
#


from setuptools import setup, find_packages
import os, os.path, re


def get_version():
    # Fetch `sqllex.__version__`.
    root = os.path.dirname(__file__)
    with open(os.path.join(root, 'src/sqllex/__init__.py')) as stream:
        source = stream.read()
    version = re.search(r"__version__ = '(?P<version>[^']+)'",
                        source).group('version')
    return version


def get_requirements():
    # Runtime dependencies.
    return [
        'PyYAML>=5.1',
        'regex',
    ]


def get_test_requirements():
    # Dependencies of the test suite.
    return [
        'pytest',
    ]


if __name__ == '__main__':
    setup(name="SQLLex",
          version=get_version(),
          description="A lexical analyzer for SQL",
          packages=find_packages('src'),
          package_dir={'': 'src'},
          python_requires='>=3.6',
          install_requires=get_requirements(),
          extras_require={'test': get_test_requirements()},
          include_package_data=True,
          zip_safe=False)
