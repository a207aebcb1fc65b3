#! /usr/bin/env python

import os
import sys
import unittest

tests = ["config", "valueset"]

testdir = os.path.realpath(os.path.dirname(sys.argv[0]))
libdir = os.path.realpath(os.path.join(testdir, "..", "packages"))
sys.path.insert(0, libdir)
sys.path.insert(0, testdir)

def suite():
    alltests = unittest.TestSuite()
    for module in [__import__("test_%s" % x) for x in tests]:
        alltests.addTest(unittest.findTestCases(module))
    return alltests

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
