from setuptools import setup, find_packages

setup(name='rotquat',
      version='0.1.0',
      description='Unit quaternion rotations with euler angle, axis angle, matrix, and rigid transform conversions',
      packages=find_packages(include=['rotquat', 'rotquat.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']})
