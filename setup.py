#!/usr/bin/env python
from setuptools import setup, find_packages
import os, re

PKG='txtwitreq'
VERSIONFILE = os.path.join('txtwitreq', '_version.py')
verstr = "unknown"
try:
    verstrline = open(VERSIONFILE, "rt").read()
except EnvironmentError:
    pass # Okay, there is no version file.
else:
    MVSRE = r"^manual_verstr *= *['\"]([^'\"]*)['\"]"
    mo = re.search(MVSRE, verstrline, re.M)
    if mo:
        mverstr = mo.group(1)
    else:
        print("unable to find version in %s" % (VERSIONFILE,))
        raise RuntimeError("if %s.py exists, it must be well-formed" % (VERSIONFILE,))
    AVSRE = r"^auto_build_num *= *['\"]([^'\"]*)['\"]"
    mo = re.search(AVSRE, verstrline, re.M)
    if mo:
        averstr = mo.group(1)
    else:
        averstr = ''
    verstr = '.'.join([mverstr, averstr])

install_requires = ['Twisted', 'zope.interface', 'pyutil >= 3.3.0']

# Run the tests with "trial txtwitreq".
tests_require = ['mock']

setup(name=PKG,
      version=verstr,
      description="Build OAuth 1.0a (HMAC-SHA1) signed requests for Twitter's REST API",
      long_description=open('README.rst').read(),
      packages = find_packages(),
      include_package_data=True,
      license = "MIT License",
      python_requires='>=3.8',
      install_requires=install_requires,
      extras_require={'test': tests_require},
      keywords="twitter oauth twisted",
      zip_safe=False, # actually it is zip safe, but zipping packages doesn't help with anything and can cause some problems (http://bugs.python.org/setuptools/issue33 )
      )
