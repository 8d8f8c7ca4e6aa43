from setuptools import setup, find_packages

setup(name='enginemath',
      version='1.0.0',
      description='Deterministic scalar math kernel and quaternion rotation algebra for real-time engines',
      packages=find_packages(include=['enginemath', 'enginemath.*']),
      python_requires='>=3.10',
      install_requires=['numpy', 'pandas'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['enginemath-showcase=enginemath.scripts.showcase:main']})
