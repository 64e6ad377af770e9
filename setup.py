from setuptools import setup

setup(name='graphorder',
      version='0.1.0',
      description='Topologically sort directed graphs and report cycles',
      license='MIT',
      packages=['graphorder'],
      python_requires='>=3.8',
      extras_require={
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': ['graphorder=graphorder.__main__:main'],
      })
