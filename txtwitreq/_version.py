# This is the version of this package. setup.py reads manual_verstr
# and auto_build_num from here.

manual_verstr = "0.1"
auto_build_num = "0"

__version__ = "%s.%s" % (manual_verstr, auto_build_num)
