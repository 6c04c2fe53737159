#!/usr/bin/env python3

from setuptools import setup, find_namespace_packages


setup(name='py_cond_wait',
      version='0.1.0',
      description='Condition Based Waiting APIs',
      author='Davide Libenzi',
      packages=find_namespace_packages(include=['py_cond_wait', 'py_cond_wait.*']),
      include_package_data=True,
      python_requires='>=3.8',
      install_requires=[
          'pyyaml',
          'psutil',
      ],
      extras_require={
          'test': [
              'pytest',
          ],
      },
      )
