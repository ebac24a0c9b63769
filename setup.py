#!/usr/bin/python3

from setuptools import setup


with open("README.md", "r") as f:
    long_description = f.read()


setup(name='lvm2cmd',
      version='0.3.0',
      description='Typed access to the reports of the LVM2 command line tools',
      long_description=long_description,
      long_description_content_type="text/markdown",
      author='Red Hat, Inc.',
      packages=['lvm2cmd', 'lvm2cmd.devicelibs', 'lvm2cmd.devices'],
      install_requires=['pyudev'],
      extras_require={'test': ['pytest']},
      python_requires='>=3.6',
      classifiers=["Development Status :: 4 - Beta",
                   "Intended Audience :: Developers",
                   "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
                   "Programming Language :: Python :: 3",
                   "Operating System :: POSIX :: Linux"],
     )
