#! /usr/bin/env python

import os
import sys
from optparse import OptionParser
from pylint import lint

def disable_message(arguments, message_id):
    arguments.append("--disable=%s" % message_id)

######################################################################

option_parser = OptionParser()
option_parser.add_option(
    "--all",
    action="store_true",
    help="perform all checks",
    default=False)
option_parser.add_option(
    "--all-complexity",
    action="store_true",
    help="perform all complexity checks",
    default=False)
options, args = option_parser.parse_args(sys.argv[1:])

topdir = os.path.dirname(os.path.abspath(sys.argv[0]))

sys.path.insert(0, os.path.join(topdir, "src/packages"))
if len(args) > 0:
    modules = args
else:
    modules = ["valueset"]

normally_disabled_tests = [
    "C0103", # "Invalid name"
    "C0114", # "Missing module docstring"
    "C0115", # "Missing class docstring"
    "C0116", # "Missing function or method docstring"
    "W0212", # "Access to a protected member foo of a client class"
    "W0603", # "Using the global statement"
    "W0621", # "Redefining name from outer scope"
]

normally_disabled_complexity_tests = [
    "R0904", # "Too many public methods."
]

flags = []
if not options.all:
    for x in normally_disabled_tests:
        disable_message(flags, x)
    if not options.all_complexity:
        for x in normally_disabled_complexity_tests:
            disable_message(flags, x)

lint.Run(flags + modules)
