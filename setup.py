import os

from setuptools import find_packages, setup


def get_version():
    ns = {}
    with open(os.path.join('mstgraph', 'version.py')) as f:
        exec(f.read(), ns)
    return ns['__version__']


setup(name='mstgraph',
      version=get_version(),
      description='Immutable graphs and minimum spanning tree calculators',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.10',
      install_requires=['numpy'],
      extras_require={'test': ['pytest', 'scipy']})
