#! /usr/bin/env python
import os
from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

def find_version(*file_paths):
    import re
    def read(*parts):
        import codecs
        with codecs.open(os.path.join(here, *parts), 'r') as fp:
            return fp.read()

    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


def readme():
    with open(os.path.join(here, 'README.md')) as f:
        return f.read()


setup(name = "rafsim",
      version = find_version("rafsim", "__init__.py"),
      description = "emergence of autocatalytic sets in random splice chemistries",
      long_description = readme(),
      long_description_content_type = "text/markdown",
      classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Chemistry',
        'Topic :: Scientific/Engineering :: Mathematics',
      ],
      license='MIT',
      packages = ["rafsim", "rafsim.examples", "rafsim.tests"],
      include_package_data=True,
      zip_safe = True,
      python_requires='>=3.6',
      test_suite = 'rafsim.tests',
      install_requires=['numpy'])
