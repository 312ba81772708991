import re

from setuptools import setup

# Read rather than import, so lxml needn't be installed to build.
with open('amtwsman/__init__.py') as f:
    __version__ = re.search(r"__version__ = '([^']+)'", f.read()).group(1)

packages = ['amtwsman']

setup(name='amtwsman',
      description='Module and command-line utility to talk WS-Management to Intel AMT and CIM agents',
      long_description=open('README.rst').read(),
      version=__version__,
      packages=packages,
      scripts=['bin/amtwsman'],
      classifiers=['Development Status :: 4 - Beta',
                   'Environment :: Console',
                   'Intended Audience :: System Administrators',
                   'Intended Audience :: Developers',
                   'Operating System :: OS Independent',
                   'Programming Language :: Python :: 3',
                   'Topic :: System :: Systems Administration'],
      keywords=['WS-Management', 'WSMAN', 'AMT', 'CIM'],
      install_requires=['lxml'],
      extras_require={'test': ['pytest']})
