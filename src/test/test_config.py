#! /usr/bin/env python

import io
import os
import shutil
import sys
import tempfile
import unittest

if __name__ == "__main__":
    libdir = os.path.realpath(
        os.path.join(os.path.dirname(sys.argv[0]), "..", "packages"))
    sys.path.insert(0, libdir)

from valueset.common import ValueSetError
from valueset.config import *
from valueset.valueset import configure, new


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)
        configure(None)

    def writeConfig(self, text, name="config"):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as fp:
            fp.write(text)
        return path

    def test_defaults(self):
        config = Config()
        config.verify()
        self.assertFalse(config.getboolean("diagnostics", "sort_elements"))
        self.assertEqual(config.getseparator("diagnostics", "separator"), " ")

    def test_read(self):
        path = self.writeConfig(
            "[diagnostics]\nsort_elements = yes\nseparator = ;\n")
        config = Config()
        self.assertEqual(config.read(path), [path])
        config.verify()
        self.assertTrue(config.getboolean("diagnostics", "sort_elements"))
        self.assertEqual(config.getseparator("diagnostics", "separator"), ";")

    def test_read_missing_file(self):
        config = Config()
        missing = os.path.join(self.tmpdir, "nonexistent")
        self.assertEqual(config.read([missing]), [])
        config.verify()

    def test_missing_section_header(self):
        path = self.writeConfig("sort_elements = yes\n")
        config = Config()
        self.assertRaises(MissingSectionHeaderError, config.read, path)

    def test_parse_errors(self):
        for text in ["[diagnostics]\n[diagnostics]\n",
                     "[diagnostics]\nsort_elements = no\nsort_elements = yes\n",
                     "[diagnostics]\nnot an option line\n"]:
            path = self.writeConfig(text)
            config = Config()
            self.assertRaises(ConfigError, config.read, path)

    def test_bad_boolean(self):
        path = self.writeConfig("[diagnostics]\nsort_elements = maybe\n")
        config = Config()
        config.read(path)
        try:
            config.verify()
        except BadConfigurationValueError as e:
            self.assertEqual(
                e.args, ("diagnostics", "sort_elements", "maybe"))
        else:
            self.fail("BadConfigurationValueError not raised")

    def test_bad_separator(self):
        config = Config()
        config.set("diagnostics", "separator", '", ')
        self.assertRaises(BadConfigurationValueError, config.verify)
        self.assertRaises(
            BadConfigurationValueError,
            config.getseparator, "diagnostics", "separator")

    def test_missing_key(self):
        config = Config()
        config.remove_option("diagnostics", "separator")
        self.assertRaises(MissingConfigurationKeyError, config.verify)

    def test_errors_are_valueset_errors(self):
        for cls in [BadConfigurationValueError,
                    MissingConfigurationKeyError,
                    MissingSectionHeaderError]:
            self.assertTrue(issubclass(cls, ConfigError))
            self.assertTrue(issubclass(cls, ValueSetError))

    def test_template(self):
        fp = io.StringIO()
        createConfigTemplate(fp)
        path = self.writeConfig(fp.getvalue())
        config = Config()
        config.read(path)
        config.verify()
        self.assertFalse(config.getboolean("diagnostics", "sort_elements"))
        self.assertEqual(config.getseparator("diagnostics", "separator"), " ")

    def test_configure_rejects_bad_config(self):
        config = Config()
        config.set("diagnostics", "sort_elements", "maybe")
        self.assertRaises(BadConfigurationValueError, configure, config)
        self.assertEqual(new("a").string(), "[a]")

    def test_configure_and_reset(self):
        config = Config()
        config.set("diagnostics", "sort_elements", "yes")
        config.set("diagnostics", "separator", "'|'")
        configure(config)
        self.assertEqual(new("b", "a").string(), "[a|b]")
        configure(None)
        self.assertIn(new("b", "a").string(), ["[a b]", "[b a]"])


if __name__ == "__main__":
    unittest.main()
